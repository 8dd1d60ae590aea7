# core/component.py
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Tuple

from core.catalog import ComponentDefinition
from core.geometry import Point
from core.pin import Pin


@dataclass(frozen=True)
class Component:
    """
    A placed instance of a catalog entry.
    Pins keep the order of the catalog definition they were created from, and
    their local positions never change after creation.
    """
    id: str
    type: str
    position: Point
    pins: Tuple[Pin, ...] = ()
    properties: Mapping[str, Any] = field(default_factory=dict)
    rotation: float = 0.0
    label: Optional[str] = None

    def __post_init__(self):
        # Snapshots share nothing writable with their history
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    @classmethod
    def from_definition(cls, definition: ComponentDefinition, component_id: str,
                        x: float, y: float) -> 'Component':
        """Instantiates the definition at (x, y) with fresh pin ids and copied defaults."""
        pins = tuple(
            Pin.from_template(template, f"{component_id}-pin-{index}")
            for index, template in enumerate(definition.pins)
        )
        return cls(
            id=component_id,
            type=definition.type,
            position=Point(x, y),
            pins=pins,
            properties=dict(definition.default_properties),
            label=definition.name,
        )

    def get_pin(self, pin_id: str) -> Optional[Pin]:
        """Return the pin with that id, or None if it is not on this component."""
        return next((p for p in self.pins if p.id == pin_id), None)

    def pin_ids(self) -> Tuple[str, ...]:
        return tuple(p.id for p in self.pins)

    def pin_position(self, pin: Pin) -> Point:
        """Absolute canvas position of one of this component's pins."""
        return self.position + pin.position

    def get_property(self, key: str, default: Any = None) -> Any:
        return self.properties.get(key, default)

    def moved_to(self, x: float, y: float) -> 'Component':
        return replace(self, position=Point(x, y))

    def with_connections(self, connected_ids: Iterable[str]) -> 'Component':
        """Returns a copy whose pins' connected flags match the given id set."""
        connected_ids = set(connected_ids)
        pins = tuple(replace(p, connected=p.id in connected_ids) for p in self.pins)
        if pins == self.pins:
            return self
        return replace(self, pins=pins)
