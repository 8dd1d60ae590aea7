# ui/wire_item.py
from typing import List, Optional
from PySide6.QtWidgets import QGraphicsLineItem, QGraphicsItem, QGraphicsPathItem
from PySide6.QtGui import QPen, QColor, QPainterPath, QPainterPathStroker
from PySide6.QtCore import Qt, QPointF

from core.circuit import Wire


class WireItem(QGraphicsLineItem):
    """
    Straight connection between two pins, drawn from endpoint positions the
    view resolves from the live components, with an X mark at each end.
    """
    COLOR = QColor("black")
    SELECTED_COLOR = QColor("blue")
    MARK_COLOR = QColor("green")
    MARK_SIZE = 3

    def __init__(self, wire: Wire, start: QPointF, end: QPointF,
                 selected: bool = False, parent: Optional[QGraphicsItem] = None):
        super().__init__(start.x(), start.y(), end.x(), end.y(), parent)
        self.wire = wire
        self.selected = selected

        pen = QPen(self.SELECTED_COLOR, 3) if selected else QPen(self.COLOR, 2)
        pen.setCapStyle(Qt.RoundCap)
        self.setPen(pen)

        self.end_marks: List[QGraphicsPathItem] = [
            self._create_mark(start),
            self._create_mark(end),
        ]

    @property
    def wire_id(self) -> str:
        return self.wire.id

    def _create_mark(self, center: QPointF) -> QGraphicsPathItem:
        s = self.MARK_SIZE
        path = QPainterPath()
        path.moveTo(center.x() - s, center.y() - s)
        path.lineTo(center.x() + s, center.y() + s)
        path.moveTo(center.x() - s, center.y() + s)
        path.lineTo(center.x() + s, center.y() - s)

        mark = QGraphicsPathItem(path, self)
        mark.setPen(QPen(self.MARK_COLOR, 1))
        return mark

    def shape(self) -> QPainterPath:
        """Increases the hit-box of the wire for easier picking."""
        path = QPainterPath()
        path.moveTo(self.line().p1())
        path.lineTo(self.line().p2())

        stroker = QPainterPathStroker()
        stroker.setWidth(10)
        return stroker.createStroke(path)

    def hit(self, scene_pos: QPointF) -> bool:
        """True when the scene point lies on the widened wire stroke."""
        return self.shape().contains(self.mapFromScene(scene_pos))
