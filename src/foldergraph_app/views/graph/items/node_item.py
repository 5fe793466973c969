"""
Node QGraphicsItem - one file of the graph.
"""

from typing import Optional, TYPE_CHECKING

from PyQt6.QtWidgets import QGraphicsItem, QStyleOptionGraphicsItem, QWidget
from PyQt6.QtCore import Qt, QRectF, QPointF
from PyQt6.QtGui import QPainter, QPainterPath, QBrush, QColor

if TYPE_CHECKING:
    from ..style_manager import StyleManager


class NodeItem(QGraphicsItem):
    """
    QGraphicsItem for rendering a graph node as a dot.

    Positioned in screen space by the canvas, so it keeps the same size at
    any zoom level.
    """

    def __init__(self, node_id: str, style_manager: Optional["StyleManager"] = None):
        super().__init__()

        self.node_id = node_id
        self._style = style_manager

        # State
        self._forced = False
        self._dragged = False
        self._hovered = False

        self.setAcceptHoverEvents(True)
        self.setToolTip(node_id)

    # -------------------------------------------------------------------------
    # State Properties
    # -------------------------------------------------------------------------

    @property
    def forced(self) -> bool:
        return self._forced

    @forced.setter
    def forced(self, value: bool):
        if self._forced != value:
            self._forced = value
            self.update()

    @property
    def dragged(self) -> bool:
        return self._dragged

    @dragged.setter
    def dragged(self, value: bool):
        if self._dragged != value:
            self._dragged = value
            self.update()

    # -------------------------------------------------------------------------
    # QGraphicsItem Interface
    # -------------------------------------------------------------------------

    def _size(self) -> float:
        return float(self._style.style.node_size) if self._style else 8.0

    def boundingRect(self) -> QRectF:
        size = self._size() + 4
        return QRectF(-size / 2, -size / 2, size, size)

    def shape(self) -> QPainterPath:
        path = QPainterPath()
        half = self._size() / 2
        path.addEllipse(QPointF(0, 0), half + 2, half + 2)
        return path

    def paint(self, painter: QPainter, option: QStyleOptionGraphicsItem, widget: Optional[QWidget] = None):
        if not self._style:
            return

        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        half = self._size() / 2

        color = self._style.get_node_color(forced=self._forced, dragged=self._dragged)
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(color))
        painter.drawEllipse(QPointF(0, 0), half, half)

        if self._hovered:
            painter.setBrush(QColor(255, 255, 255, 60))
            painter.drawEllipse(QPointF(0, 0), half + 2, half + 2)

    def hoverEnterEvent(self, event):
        self._hovered = True
        self.update()
        super().hoverEnterEvent(event)

    def hoverLeaveEvent(self, event):
        self._hovered = False
        self.update()
        super().hoverLeaveEvent(event)
