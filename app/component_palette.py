# app/component_palette.py
from typing import Dict
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGridLayout, QPushButton, QLabel
)

from core.catalog import catalog_types, lookup
from core.circuit_controller import CircuitController
from core.interaction import EditorState


class ComponentPalette(QWidget):
    """
    Side panel listing every catalog type. Clicking an entry arms it for
    placement; the checked button always mirrors the controller's pending type.
    """
    SHORT_NAMES = {"pic16": "PIC16"}

    def __init__(self, controller: CircuitController):
        super().__init__()
        self.controller = controller

        layout = QVBoxLayout()
        self.setLayout(layout)

        # --- Component Section ---
        layout.addWidget(QLabel("<b>Components</b>"))
        grid = QGridLayout()
        layout.addLayout(grid)

        self.buttons: Dict[str, QPushButton] = {}
        for index, type_tag in enumerate(catalog_types()):
            definition = lookup(type_tag)
            btn = QPushButton(self.SHORT_NAMES.get(type_tag, definition.name))
            btn.setCheckable(True)
            btn.setToolTip(definition.name)
            # Use default argument in lambda to capture the current string value
            btn.clicked.connect(lambda checked, t=type_tag: self.select_type(t))
            grid.addWidget(btn, index // 2, index % 2)
            self.buttons[type_tag] = btn

        self.controller.subscribe(self.sync_with_state)
        self.sync_with_state(self.controller.state)

    def select_type(self, type_tag: str) -> None:
        """Arms a component type for placement on the next background click."""
        self.controller.select_component_type(type_tag)
        # The controller does not notify when the type was already pending
        self.sync_with_state(self.controller.state)

    def sync_with_state(self, state: EditorState) -> None:
        for type_tag, btn in self.buttons.items():
            btn.setChecked(type_tag == state.pending_type)
