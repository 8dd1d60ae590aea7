# ui/grid.py
import math
from typing import Optional
from PySide6.QtWidgets import QGraphicsItem, QWidget
from PySide6.QtGui import QPen, QColor, QPainter
from PySide6.QtCore import QLineF, QRectF, Qt


class GridItem(QGraphicsItem):
    """
    A background item that draws the canvas grid.
    Lives under the camera root, so its spacing is fixed in model units and
    only the part of the grid inside `visible_rect` is painted.
    """
    LINE_COLOR = QColor(224, 224, 224)

    def __init__(self, spacing: int = 20, parent: Optional[QGraphicsItem] = None):
        super().__init__(parent)
        self.spacing = spacing
        self.visible_rect = QRectF()

        # Ensure the grid is behind all other elements
        self.setZValue(-100)
        self.setCacheMode(QGraphicsItem.NoCache)
        self.setAcceptedMouseButtons(Qt.NoButton)

    def set_visible_rect(self, rect: QRectF) -> None:
        """Sets the model-space area currently shown by the view."""
        self.prepareGeometryChange()
        self.visible_rect = QRectF(rect)
        self.update()

    def boundingRect(self) -> QRectF:
        return self.visible_rect

    def line_positions(self):
        """Returns (xs, ys) of the grid lines crossing the visible area."""
        rect = self.visible_rect
        if rect.isEmpty():
            return [], []
        first_x = math.floor(rect.left() / self.spacing) * self.spacing
        first_y = math.floor(rect.top() / self.spacing) * self.spacing
        xs = list(range(int(first_x), int(rect.right()) + self.spacing, self.spacing))
        ys = list(range(int(first_y), int(rect.bottom()) + self.spacing, self.spacing))
        return xs, ys

    def paint(self, painter: QPainter, option, widget: Optional[QWidget] = None) -> None:
        """Draws the vertical and horizontal grid lines within the visible area."""
        # Cosmetic pen: one device pixel wide at any zoom level
        pen = QPen(self.LINE_COLOR, 0)
        painter.setPen(pen)
        painter.setRenderHint(QPainter.Antialiasing, False)

        rect = self.visible_rect
        xs, ys = self.line_positions()
        for x in xs:
            painter.drawLine(QLineF(x, rect.top(), x, rect.bottom()))
        for y in ys:
            painter.drawLine(QLineF(rect.left(), y, rect.right(), y))
