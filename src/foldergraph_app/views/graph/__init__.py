"""
Graph visualization package.

This package provides the folder graph view with:
- Folder puddles drawn under each folder's nodes
- Puddle repulsion for nodes of other folders
- Pan, smooth zoom and node dragging
"""

from .canvas import FolderGraphCanvas
from .style_manager import StyleManager, GraphStyle

__all__ = ["FolderGraphCanvas", "StyleManager", "GraphStyle"]
