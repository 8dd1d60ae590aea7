# core/circuit.py
from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Tuple

from core.catalog import lookup
from core.component import Component
from core.geometry import Point, ViewTransform
from core.pin import Pin


@dataclass(frozen=True)
class Wire:
    """
    A connection between two pins on two different components.
    Only pin references are stored; endpoint positions are resolved from the
    live components whenever they are needed.
    """
    id: str
    from_pin: str
    to_pin: str

    def __post_init__(self):
        if self.from_pin == self.to_pin:
            raise ValueError(f"Wire {self.id} cannot connect pin {self.from_pin} to itself")

    def touches(self, pin_ids: Iterable[str]) -> bool:
        pin_ids = set(pin_ids)
        return self.from_pin in pin_ids or self.to_pin in pin_ids


@dataclass(frozen=True)
class Circuit:
    """
    Aggregate root of the schematic. Component order is insertion order and
    doubles as z-order (later components are drawn and hit-tested on top).
    """
    id: str = "main-circuit"
    name: str = "Main Circuit"
    components: Tuple[Component, ...] = ()
    wires: Tuple[Wire, ...] = ()
    view: ViewTransform = field(default_factory=ViewTransform)

    # --- Lookups ---

    def find_component(self, component_id: Optional[str]) -> Optional[Component]:
        return next((c for c in self.components if c.id == component_id), None)

    def find_pin(self, pin_id: Optional[str]) -> Optional[Tuple[Component, Pin]]:
        """Resolves a pin id to (owning component, pin), or None."""
        for component in self.components:
            pin = component.get_pin(pin_id)
            if pin is not None:
                return component, pin
        return None

    def owner_of(self, pin_id: str) -> Optional[Component]:
        found = self.find_pin(pin_id)
        return found[0] if found else None

    def pin_position(self, pin_id: str) -> Optional[Point]:
        found = self.find_pin(pin_id)
        if found is None:
            return None
        component, pin = found
        return component.pin_position(pin)

    def wire_endpoints(self, wire: Wire) -> Optional[Tuple[Point, Point]]:
        start = self.pin_position(wire.from_pin)
        end = self.pin_position(wire.to_pin)
        if start is None or end is None:
            return None
        return start, end

    def find_wire(self, wire_id: str) -> Optional[Wire]:
        return next((w for w in self.wires if w.id == wire_id), None)

    def connected_pin_ids(self) -> set:
        ids = set()
        for wire in self.wires:
            ids.add(wire.from_pin)
            ids.add(wire.to_pin)
        return ids

    # --- Hit testing (model coordinates) ---

    def component_at(self, point: Point) -> Optional[Component]:
        """Topmost component whose catalog footprint contains the point."""
        for component in reversed(self.components):
            definition = lookup(component.type)
            if definition is None:
                continue
            x, y, w, h = definition.bounds()
            local = point - component.position
            if x <= local.x <= x + w and y <= local.y <= y + h:
                return component
        return None

    def pin_at(self, point: Point, radius: float,
               component_ids: Optional[Iterable[str]] = None) -> Optional[Tuple[Component, Pin]]:
        """
        Topmost pin within `radius` of the point. When component_ids is given,
        only pins of those components are considered.
        """
        allowed = set(component_ids) if component_ids is not None else None
        for component in reversed(self.components):
            if allowed is not None and component.id not in allowed:
                continue
            for pin in component.pins:
                pos = component.pin_position(pin)
                if (pos.x - point.x) ** 2 + (pos.y - point.y) ** 2 <= radius ** 2:
                    return component, pin
        return None

    # --- Snapshot builders ---

    def with_components(self, components: Iterable[Component]) -> 'Circuit':
        return replace(self, components=tuple(components))

    def with_wires(self, wires: Iterable[Wire]) -> 'Circuit':
        """Replaces the wire set and re-derives every pin's connected flag."""
        wires = tuple(wires)
        circuit = replace(self, wires=wires)
        connected = circuit.connected_pin_ids()
        return replace(circuit, components=tuple(c.with_connections(connected) for c in self.components))

    def with_view(self, view: ViewTransform) -> 'Circuit':
        return replace(self, view=view)
