"""
Puddle QGraphicsItem - the soft enclosure drawn under a folder's nodes.
"""

from typing import Optional, TYPE_CHECKING

from PyQt6.QtWidgets import QGraphicsItem, QStyleOptionGraphicsItem, QWidget
from PyQt6.QtCore import Qt, QRectF, QPointF
from PyQt6.QtGui import QPainter, QPolygonF, QTransform, QFontMetrics

from foldergraph_core.domain.models import Enclosure, ViewportTransform

if TYPE_CHECKING:
    from ..style_manager import StyleManager


class PuddleItem(QGraphicsItem):
    """
    QGraphicsItem for rendering one folder puddle.

    Geometry is in graph coordinates; map_to_viewport() applies the
    camera so the puddle stays aligned with the nodes. Drawn behind nodes.
    """

    def __init__(self, folder: str, style_manager: Optional["StyleManager"] = None):
        super().__init__()

        self.folder = folder
        self._style = style_manager
        self._enclosure: Optional[Enclosure] = None
        self._show_label = True

        self.setZValue(-10)
        self.setToolTip(folder)

    def set_style_manager(self, style: "StyleManager"):
        """Set the style manager."""
        self._style = style
        self.update()

    @property
    def enclosure(self) -> Optional[Enclosure]:
        return self._enclosure

    def set_enclosure(self, enclosure: Enclosure):
        """Replace the drawn geometry (once per frame)."""
        self.prepareGeometryChange()
        self._enclosure = enclosure
        self.update()

    def map_to_viewport(self, transform: ViewportTransform):
        """Align the puddle with the current camera."""
        self.setTransform(QTransform(transform.scale, 0, 0, transform.scale, transform.x, transform.y))

    def boundingRect(self) -> QRectF:
        if self._enclosure is None:
            return QRectF()

        c = self._enclosure.center
        r = self._enclosure.radius
        rect = QRectF(c.x - r, c.y - r, 2 * r, 2 * r)

        if self._enclosure.polygon:
            xs = [p.x for p in self._enclosure.polygon]
            ys = [p.y for p in self._enclosure.polygon]
            rect = rect.united(QRectF(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys)))

        # Room for the outline
        return rect.adjusted(-2, -2, 2, 2)

    def paint(self, painter: QPainter, option: QStyleOptionGraphicsItem, widget: QWidget = None):
        if not self._style or self._enclosure is None:
            return

        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        enclosure = self._enclosure

        painter.setPen(self._style.get_no_pen())
        painter.setBrush(self._style.get_puddle_brush())
        painter.drawEllipse(QPointF(enclosure.center.x, enclosure.center.y),
                            enclosure.radius, enclosure.radius)

        if enclosure.polygon:
            polygon = QPolygonF([QPointF(p.x, p.y) for p in enclosure.polygon])
            painter.setPen(self._style.get_polygon_pen())
            painter.setBrush(self._style.get_puddle_brush())
            painter.drawPolygon(polygon)

        if self._show_label and enclosure.radius > 0:
            self._draw_label(painter, enclosure)

    def _draw_label(self, painter: QPainter, enclosure: Enclosure):
        """Draw the folder name at the top of the puddle."""
        font = self._style.get_font()
        painter.setFont(font)
        painter.setPen(self._style.get_text_pen())

        fm = QFontMetrics(font)
        width = max(60.0, enclosure.radius * 2)
        name = self.folder.rstrip("/").rsplit("/", 1)[-1]
        text = fm.elidedText(name, Qt.TextElideMode.ElideMiddle, int(width))

        top = enclosure.center.y - enclosure.radius
        painter.drawText(QRectF(enclosure.center.x - width / 2, top, width, fm.height()),
                         Qt.AlignmentFlag.AlignHCenter, text)
