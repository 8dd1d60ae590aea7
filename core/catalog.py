# core/catalog.py
"""
Registry of the component types that can be placed on the canvas.

Each entry fixes the footprint used for hit-testing and the selection outline,
the pin layout (local offsets from the component origin) and the default
property values copied into every new instance.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from core.geometry import Point
from core.pin import PinRole, PinTemplate


@dataclass(frozen=True)
class ComponentDefinition:
    type: str
    name: str
    width: float
    height: float
    pins: Tuple[PinTemplate, ...]
    default_properties: Mapping[str, Any] = field(default_factory=dict)
    # Top edge of the bounding box in local coordinates. Inline two-terminal
    # parts sit centred on the line joining their pins.
    body_top: float = 0

    def __post_init__(self):
        object.__setattr__(self, "default_properties", MappingProxyType(dict(self.default_properties)))

    def bounds(self) -> Tuple[float, float, float, float]:
        """Returns (x, y, width, height) of the footprint in local coordinates."""
        return (0, self.body_top, self.width, self.height)


def _pin(name: str, role: PinRole, x: float, y: float) -> PinTemplate:
    return PinTemplate(name=name, role=role, position=Point(x, y))


_B = PinRole.BIDIRECTIONAL

# DIP-18 pinout: pins 1-9 down the left edge, 10-18 up the right edge.
_PIC16_PINS = (
    _pin("RA2", _B, 0, 20),
    _pin("RA3", _B, 0, 40),
    _pin("RA4/T0CKI", _B, 0, 60),
    _pin("MCLR", PinRole.INPUT, 0, 80),
    _pin("VSS", PinRole.GROUND, 0, 100),
    _pin("RB0/INT", _B, 0, 120),
    _pin("RB1", _B, 0, 140),
    _pin("RB2", _B, 0, 160),
    _pin("RB3", _B, 0, 180),
    _pin("RB4", _B, 120, 180),
    _pin("RB5", _B, 120, 160),
    _pin("RB6", _B, 120, 140),
    _pin("RB7", _B, 120, 120),
    _pin("VDD", PinRole.POWER, 120, 100),
    _pin("OSC2", PinRole.OUTPUT, 120, 80),
    _pin("OSC1", PinRole.INPUT, 120, 60),
    _pin("RA0", _B, 120, 40),
    _pin("RA1", _B, 120, 20),
)

_DEFINITIONS: Dict[str, ComponentDefinition] = {
    "resistor": ComponentDefinition(
        type="resistor", name="Resistor", width=60, height=20, body_top=-10,
        pins=(_pin("A", _B, 0, 0), _pin("B", _B, 60, 0)),
        default_properties={"value": "1k", "tolerance": "5%"},
    ),
    "led": ComponentDefinition(
        type="led", name="LED", width=40, height=40, body_top=-20,
        pins=(_pin("Anode", PinRole.INPUT, 0, 0), _pin("Cathode", PinRole.OUTPUT, 40, 0)),
        default_properties={"color": "red", "forwardVoltage": 2.1},
    ),
    "capacitor": ComponentDefinition(
        type="capacitor", name="Capacitor", width=30, height=50, body_top=-25,
        pins=(_pin("Positive", _B, 0, 0), _pin("Negative", _B, 30, 0)),
        default_properties={"value": "100μF", "voltage": "25V"},
    ),
    "pic16": ComponentDefinition(
        type="pic16", name="PIC16F84A", width=120, height=200,
        pins=_PIC16_PINS,
        default_properties={"model": "PIC16F84A", "clockFrequency": "4MHz"},
    ),
    "ground": ComponentDefinition(
        type="ground", name="Ground", width=30, height=30,
        pins=(_pin("GND", PinRole.GROUND, 15, 0),),
    ),
    "vcc": ComponentDefinition(
        type="vcc", name="VCC", width=30, height=30,
        pins=(_pin("VCC", PinRole.POWER, 15, 30),),
        default_properties={"voltage": "5V"},
    ),
    "probe": ComponentDefinition(
        type="probe", name="Probe", width=20, height=20,
        pins=(_pin("Input", PinRole.INPUT, 0, 10),),
        default_properties={"color": "yellow"},
    ),
}

# Read-only view: no type can be added, removed or altered at runtime
COMPONENT_DEFINITIONS: Mapping[str, ComponentDefinition] = MappingProxyType(_DEFINITIONS)


def lookup(type_tag: str) -> Optional[ComponentDefinition]:
    """Returns the definition for a type tag, or None if the tag is unknown."""
    return COMPONENT_DEFINITIONS.get(type_tag)


def catalog_types() -> List[str]:
    """Type tags in palette order."""
    return list(COMPONENT_DEFINITIONS.keys())
