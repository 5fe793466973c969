"""
Style manager for the folder graph.

Centralizes colors, sizes, and fonts for nodes and puddles.
"""

from dataclasses import dataclass, field
from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QFont, QPen, QBrush


@dataclass
class GraphStyle:
    """All styling parameters for the graph."""

    # Background
    bg_color: QColor = field(default_factory=lambda: QColor(30, 30, 30))

    # Nodes
    node_color: QColor = field(default_factory=lambda: QColor(160, 160, 160))
    forced_node_color: QColor = field(default_factory=lambda: QColor(230, 140, 90))  # Being pushed
    drag_node_color: QColor = field(default_factory=lambda: QColor(100, 200, 255))

    # Puddles
    puddle_color: QColor = field(default_factory=lambda: QColor(0x51, 0x64, 0x97))
    puddle_alpha: float = 0.3
    polygon_width: int = 2

    # Text
    text_color: QColor = field(default_factory=lambda: QColor(200, 200, 200))

    # Sizes
    node_size: int = 8         # Node diameter in screen pixels
    font_size: int = 8

    # Frame timer
    frame_interval_ms: int = 16  # ~60 fps


class StyleManager:
    """Manages all styling for the folder graph."""

    def __init__(self, style: Optional[GraphStyle] = None):
        self.style = style or GraphStyle()

    def get_node_color(self, forced: bool = False, dragged: bool = False) -> QColor:
        if dragged:
            return self.style.drag_node_color
        if forced:
            return self.style.forced_node_color
        return self.style.node_color

    def get_puddle_brush(self) -> QBrush:
        """Translucent fill for the puddle circle."""
        color = QColor(self.style.puddle_color)
        color.setAlphaF(self.style.puddle_alpha)
        return QBrush(color)

    def get_polygon_pen(self) -> QPen:
        """Outline for the diagnostic hull polygon."""
        pen = QPen(self.style.puddle_color, self.style.polygon_width)
        pen.setCosmetic(True)
        return pen

    def get_font(self) -> QFont:
        font = QFont()
        font.setPointSize(self.style.font_size)
        return font

    def get_text_pen(self) -> QPen:
        return QPen(self.style.text_color)

    def get_no_pen(self) -> QPen:
        return QPen(Qt.PenStyle.NoPen)
