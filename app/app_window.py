# app_window.py
"""
Main application window for the PIC16 circuit editor.

Coordinates the schematic canvas, component palette and properties panel
around a single CircuitController.
"""

import logging
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QVBoxLayout, QFrame, QToolBar
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QAction

from core.circuit import Circuit
from core.circuit_controller import CircuitController
from ui.schematic_view import SchematicView
from app.component_palette import ComponentPalette
from app.properties_panel import PropertiesPanel

logger = logging.getLogger(__name__)


class AppWindow(QMainWindow):
    """
    The main entry point window. Owns the controller and hands it to the
    canvas, palette and properties panel, which all follow its snapshots.
    """
    # Emulator controls; there is no emulator behind them yet.
    SIMULATION_ACTIONS = ("Load HEX", "Run", "Pause", "Step", "Reset")

    def __init__(self, circuit: Optional[Circuit] = None):
        super().__init__()
        self.setWindowTitle("PIC16 Circuit Simulator")
        self.resize(1280, 800)

        self.controller = CircuitController(circuit)

        self._create_toolbar()

        # --- Central Widget ---
        central = QWidget()
        self.setCentralWidget(central)
        main_layout = QHBoxLayout(central)
        main_layout.setContentsMargins(0, 0, 0, 0)

        # Left Side Panel (Palette & Properties)
        main_layout.addWidget(self._create_side_panel())

        # Schematic View (The Canvas)
        self.schematic_view = SchematicView(self.controller)
        self.schematic_view.setMinimumSize(600, 400)
        main_layout.addWidget(self.schematic_view, stretch=1)

    def _create_toolbar(self) -> None:
        toolbar = QToolBar("Simulation")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        self.simulation_actions = {}
        for name in self.SIMULATION_ACTIONS:
            action = QAction(name, self)
            action.triggered.connect(lambda checked=False, n=name: self._on_simulation_action(n))
            toolbar.addAction(action)
            self.simulation_actions[name] = action

    def _create_side_panel(self) -> QWidget:
        panel = QWidget()
        panel.setFixedWidth(300)
        layout = QVBoxLayout(panel)
        layout.setContentsMargins(5, 5, 5, 5)

        self.palette = ComponentPalette(self.controller)
        layout.addWidget(self.palette)

        # Separator
        line = QFrame()
        line.setFrameShape(QFrame.HLine)
        line.setFrameShadow(QFrame.Sunken)
        layout.addWidget(line)

        self.properties_panel = PropertiesPanel(self.controller)
        layout.addWidget(self.properties_panel, stretch=1)

        return panel

    def _on_simulation_action(self, name: str) -> None:
        """Toolbar placeholder: accepted and ignored."""
        logger.info("'%s' is not available: no emulator is attached", name)

    def keyPressEvent(self, event) -> None:
        """Handles global application shortcuts."""
        if event.modifiers() & Qt.ControlModifier:
            key = event.key()
            stack = self.schematic_view.undo_stack

            if key == Qt.Key_Z:
                stack.undo()
            elif key == Qt.Key_Y:
                stack.redo()
            else:
                super().keyPressEvent(event)
        else:
            super().keyPressEvent(event)
