# ui/__init__.py
"""
UI package for the PIC16 circuit editor.

This package contains the schematic canvas and the scene items it renders
the circuit with.
"""

from ui.schematic_view import SchematicView
from ui.component_item import ComponentItem
from ui.pin_item import PinItem
from ui.wire_item import WireItem
from ui.grid import GridItem

__all__ = [
    "SchematicView",
    "ComponentItem",
    "PinItem",
    "WireItem",
    "GridItem"
]
