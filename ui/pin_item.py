# ui/pin_item.py
from PySide6.QtWidgets import QGraphicsEllipseItem, QGraphicsSimpleTextItem
from PySide6.QtGui import QBrush, QColor, QPen, QFont
from PySide6.QtCore import Qt, QPointF

from core.pin import Pin


class PinItem(QGraphicsEllipseItem):
    """Visual dot representing a component terminal, with its name beside it."""
    RADIUS = 4

    def __init__(self, pin: Pin, parent):
        r = self.RADIUS
        super().__init__(-r, -r, 2 * r, 2 * r, parent)

        self.pin = pin
        self.setPos(QPointF(pin.position.x, pin.position.y))

        if pin.connected:
            self.setBrush(QBrush(QColor("green"), Qt.SolidPattern))
            self.setPen(QPen(QColor("darkgreen"), 1))
        else:
            self.setBrush(QBrush(QColor("silver"), Qt.SolidPattern))
            self.setPen(QPen(QColor("gray"), 1))

        self.name_label = QGraphicsSimpleTextItem(pin.name, self)
        font = QFont()
        font.setPointSizeF(6)
        font.setBold(True)
        self.name_label.setFont(font)
        self.name_label.setBrush(QBrush(QColor("blue")))
        self.name_label.setPos(8, -4)

        # Ensure it renders above the parent component's body
        self.setZValue(5)

    @property
    def pin_id(self) -> str:
        return self.pin.id
