# core package
# Expose main classes for convenience

from .geometry import Point, ViewTransform
from .pin import Pin, PinRole, PinTemplate
from .catalog import ComponentDefinition, lookup, catalog_types
from .component import Component
from .circuit import Circuit, Wire
from .interaction import EditorState, Idle, ComponentSelected, WireSelected, PlacementPending, Wiring
from .circuit_controller import CircuitController
