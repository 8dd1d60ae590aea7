# core/circuit_controller.py
import itertools
import logging
from typing import Callable, List, Optional

from core import transitions
from core.catalog import lookup
from core.circuit import Circuit
from core.geometry import Point
from core.interaction import EditorState

logger = logging.getLogger(__name__)

StateListener = Callable[[EditorState], None]


class CircuitController:
    """
    Owns the current editor snapshot and is the only place it is replaced.

    Every operation runs a pure transition from core.transitions, swaps in the
    resulting snapshot and notifies subscribers when anything changed. The
    canvas, palette and properties panel only ever read the snapshot.
    """

    def __init__(self, circuit: Optional[Circuit] = None):
        self._state = EditorState(circuit or Circuit())
        self._listeners: List[StateListener] = []
        self._ids = itertools.count(1)

    # --- State access ---

    @property
    def state(self) -> EditorState:
        return self._state

    @property
    def circuit(self) -> Circuit:
        return self._state.circuit

    def subscribe(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def _apply(self, new_state: EditorState) -> bool:
        if new_state == self._state:
            return False
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)
        return True

    def _next_id(self, prefix: str) -> str:
        return f"{prefix}-{next(self._ids)}"

    # --- Components ---

    def add_component(self, type_tag: str, x: float, y: float) -> Optional[str]:
        """Places a catalog part at (x, y). Returns its id, or None for an unknown type."""
        if lookup(type_tag) is None:
            logger.warning("Ignoring placement of unknown component type '%s'", type_tag)
            return None
        component_id = self._next_id(type_tag)
        self._apply(transitions.add_component(self._state, type_tag, x, y, component_id))
        logger.debug("Placed %s at (%.1f, %.1f)", component_id, x, y)
        return component_id

    def remove_component(self, component_id: str) -> None:
        if self._apply(transitions.remove_component(self._state, component_id)):
            logger.debug("Removed %s", component_id)

    def move_component(self, component_id: str, x: float, y: float) -> None:
        self._apply(transitions.move_component(self._state, component_id, x, y))

    def select_component(self, component_id: Optional[str]) -> None:
        self._apply(transitions.select_component(self._state, component_id))

    def select_wire(self, wire_id: Optional[str]) -> None:
        self._apply(transitions.select_wire(self._state, wire_id))

    def select_component_type(self, type_tag: Optional[str]) -> None:
        self._apply(transitions.select_component_type(self._state, type_tag))

    # --- Wiring ---

    def start_wiring(self, pin_id: str) -> None:
        self._apply(transitions.start_wiring(self._state, pin_id))

    def complete_wiring(self, pin_id: str) -> Optional[str]:
        """Finishes the wire started at the first pin. Returns the new wire id, if any."""
        before = self._state.circuit
        first_pin_id = self._state.first_pin_id
        wire_id = self._next_id("wire")
        self._apply(transitions.complete_wiring(self._state, pin_id, wire_id))

        if self._state.circuit is before:
            if first_pin_id is not None and first_pin_id != pin_id:
                logger.info("Connection %s -> %s rejected", first_pin_id, pin_id)
            return None
        logger.debug("Connected %s -> %s as %s", first_pin_id, pin_id, wire_id)
        return wire_id

    def cancel_wiring(self) -> None:
        self._apply(transitions.cancel_wiring(self._state))

    def handle_pin_click(self, pin_id: str) -> Optional[str]:
        """A pin click starts a wire when idle and completes it otherwise."""
        if not self._state.is_wiring:
            self.start_wiring(pin_id)
            return None
        return self.complete_wiring(pin_id)

    def remove_wire(self, wire_id: str) -> None:
        if self._apply(transitions.remove_wire(self._state, wire_id)):
            logger.debug("Removed %s", wire_id)

    # --- View transform ---

    def set_view_transform(self, scale: float, offset: Point) -> None:
        self._apply(transitions.set_view_transform(self._state, scale, offset))

    def zoom_at(self, pointer: Point, zoom_in: bool) -> None:
        view = self.circuit.view.zoomed_at(pointer, zoom_in)
        self.set_view_transform(view.scale, view.offset)

    def pan_by(self, dx: float, dy: float) -> None:
        view = self.circuit.view.panned_by(dx, dy)
        self.set_view_transform(view.scale, view.offset)

    # --- History ---

    def restore(self, circuit: Circuit) -> None:
        """Replaces the circuit with an earlier snapshot (undo/redo)."""
        self._apply(transitions.restore_circuit(self._state, circuit))
