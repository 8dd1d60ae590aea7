# ui/component_item.py
from dataclasses import replace
from typing import List, Optional
from PySide6.QtWidgets import (
    QGraphicsRectItem, QGraphicsSimpleTextItem, QGraphicsItem,
    QGraphicsPolygonItem, QGraphicsEllipseItem, QGraphicsLineItem,
    QGraphicsPathItem
)
from PySide6.QtCore import Qt, QPointF, QRectF
from PySide6.QtGui import QBrush, QColor, QPolygonF, QPen, QFont, QPainterPath

from core.catalog import ComponentDefinition
from core.component import Component
from ui.pin_item import PinItem


class ComponentItem(QGraphicsRectItem):
    """
    Scene projection of one placed component: its schematic symbol, its pins
    (only while they can be clicked) and the dashed selection outline.
    The item is rebuilt from the model on every change and never edits it.
    """
    GENERIC_BOUNDS = (-20, -20, 40, 40)
    SELECTION_MARGIN = 10

    def __init__(self, component: Component, definition: Optional[ComponentDefinition],
                 selected: bool = False, show_pins: bool = False,
                 parent: Optional[QGraphicsItem] = None):
        x, y, width, height = definition.bounds() if definition else self.GENERIC_BOUNDS
        super().__init__(x, y, width, height, parent)
        self.model = component
        self.definition = definition
        self.selected = selected
        self.show_pins = show_pins

        self._stroke_color = QColor("black")
        self.setPos(component.position.x, component.position.y)
        self.setRotation(component.rotation)

        # --- Visuals: Transparent bounding box for all components ---
        self.setBrush(QBrush(Qt.transparent))
        self.setPen(QPen(Qt.NoPen))

        self._create_symbol()

        # --- Pins ---
        self.pin_items: List[PinItem] = []
        if show_pins or selected:
            for pin in component.pins:
                self.pin_items.append(PinItem(pin, self))

        # --- Selection indicator ---
        self.selection_outline: Optional[QGraphicsRectItem] = None
        if selected:
            m = self.SELECTION_MARGIN
            outline = QGraphicsRectItem(self.rect().adjusted(-m, -m, m, m), self)
            pen = QPen(QColor("blue"), 2)
            pen.setStyle(Qt.DashLine)
            outline.setPen(pen)
            outline.setBrush(QBrush(Qt.NoBrush))
            self.selection_outline = outline

    @property
    def component_id(self) -> str:
        return self.model.id

    def matches(self, component: Component, selected: bool, show_pins: bool) -> bool:
        """True when this item already draws the component in that state, wherever it stands."""
        if self.selected != selected or self.show_pins != show_pins:
            return False
        return self.model is component or replace(self.model, position=component.position) == component

    def move_to(self, component: Component) -> None:
        self.model = component
        self.setPos(component.position.x, component.position.y)

    def _pen(self, width: float = 2) -> QPen:
        return QPen(self._stroke_color, width)

    def _line(self, x1: float, y1: float, x2: float, y2: float, width: float = 2) -> QGraphicsLineItem:
        line = QGraphicsLineItem(x1, y1, x2, y2, self)
        line.setPen(self._pen(width))
        return line

    def _text(self, text: str, x: float, y: float, size: float = 8,
              color: QColor = None, bold: bool = False, family: str = None) -> QGraphicsSimpleTextItem:
        item = QGraphicsSimpleTextItem(text, self)
        font = QFont(family) if family else QFont()
        font.setPointSizeF(size)
        font.setBold(bold)
        item.setFont(font)
        item.setBrush(QBrush(color or self._stroke_color))
        item.setPos(x, y)
        return item

    def _create_symbol(self) -> None:
        comp_type = self.model.type

        if comp_type == "resistor":
            self._create_resistor_symbol()
        elif comp_type == "led":
            self._create_led_symbol()
        elif comp_type == "capacitor":
            self._create_capacitor_symbol()
        elif comp_type == "ground":
            self._create_ground_symbol()
        elif comp_type == "vcc":
            self._create_vcc_symbol()
        elif comp_type == "pic16":
            self._create_pic16_symbol()
        elif comp_type == "probe":
            self._create_probe_symbol()
        else:
            self._create_generic_symbol()

    def _create_resistor_symbol(self) -> None:
        """Creates a zigzag resistor symbol (US style) between the two pins."""
        width = self.rect().width()
        lead_length = 10
        peak_height = 6

        self.resistor_lead_left = self._line(0, 0, lead_length, 0)

        # Zigzag: centre -> up -> down ... -> centre
        zigzag_start = lead_length
        zigzag_end = width - lead_length
        half_segment_width = (zigzag_end - zigzag_start) / 12

        path = QPainterPath()
        path.moveTo(zigzag_start, 0)
        path.lineTo(zigzag_start + half_segment_width, -peak_height)

        current_x = zigzag_start + half_segment_width
        going_down = True
        for i in range(5):
            current_x += 2 * half_segment_width
            path.lineTo(current_x, peak_height if going_down else -peak_height)
            going_down = not going_down
        path.lineTo(zigzag_end, 0)

        self.resistor_zigzag = QGraphicsPathItem(path, self)
        self.resistor_zigzag.setPen(self._pen())
        self.resistor_zigzag.setBrush(QBrush(Qt.NoBrush))

        self.resistor_lead_right = self._line(zigzag_end, 0, width, 0)
        self.value_label = self._text(str(self.model.get_property("value", "1k")), width / 2 - 10, 10)

    def _create_led_symbol(self) -> None:
        """Creates an LED symbol: diode triangle, cathode bar and light rays when lit."""
        width = self.rect().width()
        center_x = width / 2
        half = 8
        # isOn is not in the catalog defaults; it is reserved for a logic-level emulator
        lit = bool(self.model.get_property("isOn", False))

        self.led_lead_left = self._line(0, 0, center_x - half, 0)

        triangle = QPolygonF([
            QPointF(center_x - half, -half),
            QPointF(center_x + half, 0),
            QPointF(center_x - half, half),
        ])
        self.led_triangle = QGraphicsPolygonItem(triangle, self)
        self.led_triangle.setPen(self._pen())
        self.led_triangle.setBrush(QBrush(QColor("white")))

        self.led_bar = self._line(center_x + half, -half, center_x + half, half, width=3)
        self.led_lead_right = self._line(center_x + half, 0, width, 0)

        self.led_rays: List[QGraphicsLineItem] = []
        if lit:
            for y1, y2 in ((-10, -15), (-5, -9), (5, 9), (10, 15)):
                ray = QGraphicsLineItem(center_x + 6, y1, center_x + 14, y2, self)
                ray.setPen(QPen(QColor("yellow"), 1))
                self.led_rays.append(ray)

        indicator_color = QColor(self.model.get_property("color", "red")) if lit else QColor("gray")
        self.led_indicator = QGraphicsEllipseItem(center_x - 5, -3, 6, 6, self)
        self.led_indicator.setBrush(QBrush(indicator_color))
        self.led_indicator.setPen(QPen(Qt.NoPen))

    def _create_capacitor_symbol(self) -> None:
        """Creates a capacitor symbol with two parallel plates."""
        width = self.rect().width()
        center_x = width / 2
        plate_gap = 5
        plate_half_height = 20

        self.cap_lead_left = self._line(0, 0, center_x - plate_gap, 0)
        self.cap_plate_left = self._line(center_x - plate_gap, -plate_half_height,
                                         center_x - plate_gap, plate_half_height, width=3)
        self.cap_plate_right = self._line(center_x + plate_gap, -plate_half_height,
                                          center_x + plate_gap, plate_half_height, width=3)
        self.cap_lead_right = self._line(center_x + plate_gap, 0, width, 0)
        self.value_label = self._text(str(self.model.get_property("value", "100μF")), -5, 22, size=7)

    def _create_ground_symbol(self) -> None:
        """Creates the ground symbol: a stem from the pin and three shrinking bars."""
        center_x = self.rect().width() / 2

        self.gnd_vertical = self._line(center_x, 0, center_x, 12)

        self.gnd_bars = []
        for i, (bar_width, bar_y) in enumerate(zip([30, 20, 10], [12, 18, 24])):
            bar = self._line(center_x - bar_width / 2, bar_y, center_x + bar_width / 2, bar_y, width=3 - i)
            self.gnd_bars.append(bar)

    def _create_vcc_symbol(self) -> None:
        """Creates the supply symbol: a circled plus sign on a stem down to the pin."""
        rect = self.rect()
        center_x = rect.width() / 2
        radius = 8

        self.vcc_stem = self._line(center_x, rect.bottom(), center_x, 2 * radius)
        self.vcc_circle = QGraphicsEllipseItem(center_x - radius, 0, 2 * radius, 2 * radius, self)
        self.vcc_circle.setPen(self._pen())
        self.vcc_circle.setBrush(QBrush(QColor("white")))
        self.plus_label = self._text("+", center_x - 4, 0, size=9, bold=True)
        self.value_label = self._text(str(self.model.get_property("voltage", "5V")), center_x - 8, -16, size=7)

    def _create_pic16_symbol(self) -> None:
        """Creates the DIP package body with its pin names and orientation notch."""
        rect = self.rect()
        white = QColor("white")

        self.ic_body = QGraphicsPathItem(self)
        path = QPainterPath()
        path.addRoundedRect(rect, 5, 5)
        self.ic_body.setPath(path)
        self.ic_body.setPen(self._pen())
        self.ic_body.setBrush(QBrush(QColor("black")))

        self.ic_label = self._text(self.model.get_property("model", "PIC16F84A"),
                                   rect.width() / 2 - 30, rect.height() / 2 - 8,
                                   size=8, color=white, family="monospace")

        self.ic_pin_markers = []
        for pin in self.model.pins:
            px, py = pin.position.x, pin.position.y
            marker = QGraphicsEllipseItem(px - 4, py - 4, 8, 8, self)
            marker.setBrush(QBrush(QColor("silver")))
            marker.setPen(QPen(QColor("black"), 1))
            self.ic_pin_markers.append(marker)

            # Names sit inside the body, next to their pin
            name_x = px + 6 if px < rect.width() / 2 else px - 40
            self._text(pin.name, name_x, py - 5, size=5, color=white, family="monospace")

        self.ic_notch = QGraphicsEllipseItem(rect.width() / 2 - 5, 0, 10, 10, self)
        self.ic_notch.setBrush(QBrush(white))
        self.ic_notch.setPen(QPen(Qt.NoPen))

    def _create_probe_symbol(self) -> None:
        rect = self.rect()
        self.probe_circle = QGraphicsEllipseItem(rect, self)
        self.probe_circle.setPen(self._pen())
        self.probe_circle.setBrush(QBrush(QColor(self.model.get_property("color", "yellow"))))
        self.probe_label = self._text("P", rect.width() / 2 - 3, rect.height() / 2 - 7, size=8, bold=True)

    def _create_generic_symbol(self) -> None:
        """Fallback symbol for types the catalog does not know."""
        rect = self.rect()
        self.generic_rect = QGraphicsRectItem(rect, self)
        self.generic_rect.setPen(self._pen())
        self.generic_rect.setBrush(QBrush(QColor("lightgray")))
        self._text("?", rect.center().x() - 4, rect.center().y() - 10, size=12)

    def outline_rect(self) -> QRectF:
        """Local rectangle of the selection outline (empty when not selected)."""
        if self.selection_outline is None:
            return QRectF()
        return self.selection_outline.rect()
