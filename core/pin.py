# core/pin.py
from dataclasses import dataclass
from enum import Enum

from core.geometry import Point


class PinRole(Enum):
    """Defines the electrical nature of a component pin."""
    INPUT = "input"
    OUTPUT = "output"
    BIDIRECTIONAL = "bidirectional"
    POWER = "power"
    GROUND = "ground"


@dataclass(frozen=True)
class PinTemplate:
    """Catalog-side description of a pin, before it belongs to a placed component."""
    name: str
    role: PinRole
    position: Point


@dataclass(frozen=True)
class Pin:
    """
    Represents a physical/logical connection point on a placed component.
    The position is local to the owning component's origin.
    """
    id: str
    name: str
    role: PinRole
    position: Point
    connected: bool = False
    # Reserved for logic-level simulation; always False for now.
    value: bool = False

    @classmethod
    def from_template(cls, template: PinTemplate, pin_id: str) -> 'Pin':
        return cls(id=pin_id, name=template.name, role=template.role, position=template.position)
