"""
QGraphicsItem subclasses for graph visualization.
"""

from .node_item import NodeItem
from .puddle_item import PuddleItem

__all__ = ["NodeItem", "PuddleItem"]
