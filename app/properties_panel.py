# app/properties_panel.py
import math
from typing import List, Tuple
from PySide6.QtWidgets import QWidget, QFormLayout, QLabel, QVBoxLayout, QPushButton, QScrollArea

from core.circuit_controller import CircuitController
from core.component import Component
from core.interaction import EditorState

Row = Tuple[str, str]


def short_pin_label(pin_id: str) -> str:
    """Last dash-separated segment of a pin id (its ordinal on the component)."""
    return pin_id.split("-")[-1]


def component_rows(component: Component) -> List[Row]:
    x = math.floor(component.position.x + 0.5)
    y = math.floor(component.position.y + 0.5)
    rows = [
        ("Type", component.type),
        ("ID", component.id),
        ("Position", f"({x}, {y})"),
        ("Pins", str(len(component.pins))),
    ]
    rows.extend((key, str(value)) for key, value in component.properties.items())
    return rows


def describe_state(state: EditorState) -> List[Row]:
    """
    Text shown in the panel for a snapshot, as (label, value) rows.
    Rows with an empty label are free-standing lines.
    """
    if state.selected_component_id is not None:
        component = state.circuit.find_component(state.selected_component_id)
        if component is None:
            return [("", "Component not found")]
        return component_rows(component)

    if state.selected_wire_id is not None:
        wire = state.circuit.find_wire(state.selected_wire_id)
        if wire is None:
            return [("", "Wire not found")]
        return [("Wire", wire.id), ("From", wire.from_pin), ("To", wire.to_pin)]

    if state.is_wiring:
        return [
            ("", "Wiring Mode"),
            ("Starting from pin", short_pin_label(state.first_pin_id)),
            ("", "Click on another pin to complete the connection"),
        ]

    if state.pending_type is not None:
        return [
            ("Placing", state.pending_type),
            ("", "Click on the canvas to place the component"),
        ]

    return [
        ("", "Select a component from the palette or click on a component to view its properties"),
        ("Wiring", "Click on a pin to start connecting wires"),
    ]


class PropertiesPanel(QWidget):
    """
    A read-only side panel describing the current selection, the wire in
    progress or the pending placement.
    """

    def __init__(self, controller: CircuitController):
        super().__init__()
        self.controller = controller
        self.current_rows: List[Row] = []

        self.main_layout = QVBoxLayout(self)
        self.main_layout.addWidget(QLabel("<b>Properties</b>"))

        scroll_area = QScrollArea()
        scroll_area.setWidgetResizable(True)
        scroll_content = QWidget()
        scroll_area.setWidget(scroll_content)
        self.form = QFormLayout(scroll_content)
        self.main_layout.addWidget(scroll_area)

        self.cancel_wiring_btn = QPushButton("Cancel Wiring")
        self.cancel_wiring_btn.clicked.connect(lambda: self.controller.cancel_wiring())
        self.main_layout.addWidget(self.cancel_wiring_btn)

        self.controller.subscribe(self.refresh)
        self.refresh(self.controller.state)

    def _clear_form(self) -> None:
        """Remove all form rows and their widgets."""
        for i in reversed(range(self.form.rowCount())):
            self.form.removeRow(i)

    def refresh(self, state: EditorState) -> None:
        self._clear_form()
        self.current_rows = describe_state(state)

        for label, value in self.current_rows:
            value_label = QLabel(value)
            value_label.setWordWrap(True)
            if label:
                self.form.addRow(QLabel(f"<b>{label}:</b>"), value_label)
            else:
                self.form.addRow(value_label)

        self.cancel_wiring_btn.setVisible(state.is_wiring)
