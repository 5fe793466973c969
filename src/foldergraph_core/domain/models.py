"""
Domain models (DTOs) for FolderGraph.

These are pure data classes with no Qt or filesystem dependencies.
"""

import math
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any

from .enums import ForceAction


ROOT_PATH = "/"


@dataclass(frozen=True)
class Point:
    """An immutable 2D point. Compared and hashed by value."""
    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> "Point":
        return Point(self.x * k, self.y * k)

    __rmul__ = __mul__

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def distance_to(self, other: "Point") -> float:
        return (other - self).length()


ORIGIN = Point(0.0, 0.0)


@dataclass(eq=False)
class GraphNode:
    """
    A node of the external simulation.

    The host owns the node's lifetime. The engine reads the position and may
    nudge it directly; that value is a local copy for this frame, the
    simulation keeps the authoritative one. Compared by identity.
    """
    node_id: str
    x: float = 0.0
    y: float = 0.0

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    def move_to(self, point: Point) -> None:
        self.x = point.x
        self.y = point.y


# -----------------------------------------------------------------------------
# Vault entries (what creation events carry)
# -----------------------------------------------------------------------------

@dataclass
class FolderEntry:
    """A folder in the vault."""
    path: str
    children: List[Any] = field(default_factory=list)

    @property
    def is_root(self) -> bool:
        return self.path in (ROOT_PATH, "")


@dataclass
class FileEntry:
    """A file in the vault."""
    path: str
    parent: Optional[FolderEntry] = None


# -----------------------------------------------------------------------------
# Force commands (engine -> simulation)
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PinNode:
    """Hold a node at (x, y) in the simulation."""
    node_id: str
    x: float
    y: float

    action = ForceAction.PIN

    def to_message(self) -> Dict[str, Any]:
        return {
            "forceNode": {"id": self.node_id, "x": self.x, "y": self.y},
            "run": True,
        }


@dataclass(frozen=True)
class UnpinNode:
    """Release a node back to native forces."""
    node_id: str

    action = ForceAction.UNPIN

    def to_message(self) -> Dict[str, Any]:
        return {
            "forceNode": {"id": self.node_id, "x": None, "y": None},
            "run": True,
        }


def command_from_message(message: Dict[str, Any]):
    """
    Parse a force message back into a command.

    Returns None if the message carries no forceNode.
    """
    force = message.get("forceNode")
    if not force:
        return None
    if force.get("x") is None or force.get("y") is None:
        return UnpinNode(str(force["id"]))
    return PinNode(str(force["id"]), float(force["x"]), float(force["y"]))


# -----------------------------------------------------------------------------
# Render output
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Enclosure:
    """Drawable geometry for one folder puddle."""
    folder: str
    center: Point
    radius: float
    polygon: Optional[List[Point]] = None  # Diagnostic only, counter-clockwise


@dataclass
class Camera:
    """Renderer camera, stepped once per frame by advance()."""
    pan_x: float = 0.0
    pan_y: float = 0.0
    pan_vx: float = 0.0            # Keyboard panning velocity
    pan_vy: float = 0.0
    scale: float = 1.0
    target_scale: float = 1.0      # Scale being animated towards
    mouse_x: float = 0.0
    mouse_y: float = 0.0
    panning: bool = False          # Mouse-drag panning in progress

    def advance(self, mouse_x: float, mouse_y: float) -> "ViewportTransform":
        """Step the zoom and keyboard pan one frame and return the transform to draw with."""
        transform = ViewportTransform.from_camera(self, mouse_x, mouse_y)
        self.scale = transform.scale
        if not self.panning:
            self.pan_x = transform.x
            self.pan_y = transform.y
        return transform


@dataclass(frozen=True)
class ViewportTransform:
    """Pan offset and uniform scale that align drawn shapes with the camera."""
    x: float = 0.0
    y: float = 0.0
    scale: float = 1.0

    @classmethod
    def identity(cls) -> "ViewportTransform":
        return cls()

    @classmethod
    def from_camera(cls, camera: Camera, mouse_x: float = 0.0,
                    mouse_y: float = 0.0) -> "ViewportTransform":
        """
        Build the transform for the current frame.

        Args:
            camera: Renderer camera state
            mouse_x, mouse_y: Mouse position stored at the start of the frame

        Returns:
            Transform with a blended scale and a pan that anticipates the
            panning in progress
        """
        scale = 0.85 * camera.scale + 0.15 * camera.target_scale

        if not camera.panning:
            x = camera.pan_x + 1000 * camera.pan_vx / 60
            y = camera.pan_y + 1000 * camera.pan_vy / 60
        else:
            x = camera.pan_x + camera.mouse_x - mouse_x
            y = camera.pan_y + camera.mouse_y - mouse_y

        return cls(x, y, scale)

    def map_point(self, point: Point) -> Point:
        return Point(self.x + point.x * self.scale, self.y + point.y * self.scale)

    def unmap_point(self, point: Point) -> Point:
        if self.scale == 0:
            return ORIGIN
        return Point((point.x - self.x) / self.scale, (point.y - self.y) / self.scale)
