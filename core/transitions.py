# core/transitions.py
"""
Pure state transitions of the editor.

Every function takes the current EditorState plus its arguments and returns
the next EditorState. A rejected request returns a state whose circuit is the
very same object as before, which callers can use to detect "nothing changed".
Identifier allocation is left to the caller so these stay deterministic.
"""
from dataclasses import replace
from typing import Optional

from core.catalog import lookup
from core.circuit import Circuit, Wire
from core.component import Component
from core.geometry import Point, ViewTransform
from core.interaction import (
    ComponentSelected, EditorState, Idle, PlacementPending, WireSelected, Wiring
)


def add_component(state: EditorState, type_tag: str, x: float, y: float,
                  component_id: str) -> EditorState:
    definition = lookup(type_tag)
    if definition is None:
        return state
    component = Component.from_definition(definition, component_id, x, y)
    circuit = state.circuit.with_components(state.circuit.components + (component,))
    return replace(state, circuit=circuit)


def remove_component(state: EditorState, component_id: str) -> EditorState:
    """Deletes the component and every wire attached to one of its pins."""
    component = state.circuit.find_component(component_id)
    if component is None:
        return state

    pin_ids = component.pin_ids()
    circuit = state.circuit.with_components(
        c for c in state.circuit.components if c.id != component_id
    )
    circuit = circuit.with_wires(w for w in circuit.wires if not w.touches(pin_ids))

    interaction = state.interaction
    if state.selected_component_id == component_id:
        interaction = Idle()
    elif state.first_pin_id in pin_ids:
        interaction = Idle()
    elif state.selected_wire_id is not None and circuit.find_wire(state.selected_wire_id) is None:
        interaction = Idle()
    return EditorState(circuit, interaction)


def move_component(state: EditorState, component_id: str, x: float, y: float) -> EditorState:
    if state.circuit.find_component(component_id) is None:
        return state
    circuit = state.circuit.with_components(
        c.moved_to(x, y) if c.id == component_id else c for c in state.circuit.components
    )
    return replace(state, circuit=circuit)


def remove_wire(state: EditorState, wire_id: str) -> EditorState:
    if state.circuit.find_wire(wire_id) is None:
        return state
    circuit = state.circuit.with_wires(w for w in state.circuit.wires if w.id != wire_id)
    interaction = Idle() if state.selected_wire_id == wire_id else state.interaction
    return EditorState(circuit, interaction)


def select_component(state: EditorState, component_id: Optional[str]) -> EditorState:
    """
    Selecting an id does not check that it exists. Clearing (None) only drops a
    component selection; a pending placement or an in-progress wire survives.
    """
    if component_id is not None:
        return replace(state, interaction=ComponentSelected(component_id))
    if isinstance(state.interaction, ComponentSelected):
        return replace(state, interaction=Idle())
    return state


def select_wire(state: EditorState, wire_id: Optional[str]) -> EditorState:
    """Selecting a wire replaces any other mode. Clearing (None) only drops a wire selection."""
    if wire_id is not None:
        return replace(state, interaction=WireSelected(wire_id))
    if isinstance(state.interaction, WireSelected):
        return replace(state, interaction=Idle())
    return state


def select_component_type(state: EditorState, type_tag: Optional[str]) -> EditorState:
    if type_tag is not None:
        return replace(state, interaction=PlacementPending(type_tag))
    if isinstance(state.interaction, PlacementPending):
        return replace(state, interaction=Idle())
    return state


def start_wiring(state: EditorState, pin_id: str) -> EditorState:
    return replace(state, interaction=Wiring(pin_id))


def complete_wiring(state: EditorState, second_pin_id: str, wire_id: str) -> EditorState:
    """
    Resolves an in-progress wire. Every outcome leaves wiring mode; a wire is
    only created when both pins exist and belong to different components.
    """
    idle = replace(state, interaction=Idle())
    first_pin_id = state.first_pin_id
    if first_pin_id is None or first_pin_id == second_pin_id:
        return idle

    first_owner = state.circuit.owner_of(first_pin_id)
    second_owner = state.circuit.owner_of(second_pin_id)
    if first_owner is None or second_owner is None:
        return idle
    if first_owner.id == second_owner.id:
        return idle

    wire = Wire(id=wire_id, from_pin=first_pin_id, to_pin=second_pin_id)
    circuit = state.circuit.with_wires(state.circuit.wires + (wire,))
    return EditorState(circuit, Idle())


def cancel_wiring(state: EditorState) -> EditorState:
    if state.is_wiring:
        return replace(state, interaction=Idle())
    return state


def set_view_transform(state: EditorState, scale: float, offset: Point) -> EditorState:
    view = ViewTransform(scale, offset)
    if view == state.circuit.view:
        return state
    return replace(state, circuit=state.circuit.with_view(view))


def restore_circuit(state: EditorState, circuit: Circuit) -> EditorState:
    """
    Swaps in another circuit snapshot (undo/redo). Interaction modes that
    reference something the restored circuit lacks fall back to Idle. The
    current camera is kept; zoom and pan are not part of the edit history.
    """
    circuit = circuit.with_view(state.circuit.view)
    interaction = state.interaction
    if isinstance(interaction, ComponentSelected) and circuit.find_component(interaction.component_id) is None:
        interaction = Idle()
    elif isinstance(interaction, Wiring) and circuit.find_pin(interaction.first_pin_id) is None:
        interaction = Idle()
    elif isinstance(interaction, WireSelected) and circuit.find_wire(interaction.wire_id) is None:
        interaction = Idle()
    return EditorState(circuit, interaction)
