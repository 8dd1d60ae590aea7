# app/__init__.py
"""
Application package for the PIC16 circuit editor.

This package contains the main application window and its side panels.
"""

from app.app_window import AppWindow
from app.component_palette import ComponentPalette
from app.properties_panel import PropertiesPanel

__all__ = [
    "AppWindow",
    "ComponentPalette",
    "PropertiesPanel"
]
