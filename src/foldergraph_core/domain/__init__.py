"""
Domain models for FolderGraph.

Contains DTOs, enums, and data structures used throughout the application.
"""

from .models import (
    ROOT_PATH,
    ORIGIN,
    Point,
    GraphNode,
    FolderEntry,
    FileEntry,
    PinNode,
    UnpinNode,
    command_from_message,
    Enclosure,
    Camera,
    ViewportTransform,
)
from .enums import (
    ForceAction,
)

__all__ = [
    # Models
    "ROOT_PATH",
    "ORIGIN",
    "Point",
    "GraphNode",
    "FolderEntry",
    "FileEntry",
    "PinNode",
    "UnpinNode",
    "command_from_message",
    "Enclosure",
    "Camera",
    "ViewportTransform",
    # Enums
    "ForceAction",
]
