"""
Folder cluster - the puddle of one folder.

Owns the folder's member nodes, derives hull, center and radius from their
current positions, and pushes non-member nodes out of the puddle.
"""

from typing import List, Optional, Set, Iterable

from ..config import ClusterConfig
from ..domain.models import Point, ORIGIN, GraphNode, PinNode, UnpinNode, Enclosure
from ..ports.force_port import ForceChannel
from .geometry import (
    convex_hull,
    bounding_box_center,
    distance,
    sort_counter_clockwise,
    ease_out_quad,
)

# Push direction for a node sitting exactly on the center
_FALLBACK_DIRECTION = Point(1.0, 0.0)


class FolderCluster:
    """
    A folder visualized in the graph.

    Lifecycle per frame (driven by ClusterRegistry):
        update()          -> hull, center, radius
        apply_force(node) -> once for every node that is not being dragged

    Members are fixed at construction. Nodes pinned by this cluster are
    remembered so that each one is released exactly once when it leaves
    the repulsion zone.
    """

    def __init__(
        self,
        folder: str,
        channel: ForceChannel,
        config: Optional[ClusterConfig] = None,
        members: Iterable[GraphNode] = (),
    ):
        self.folder = folder
        self.config = config or ClusterConfig()
        self._channel = channel

        self.members: List[GraphNode] = []
        self._member_ids: Set[int] = set()
        for node in members:
            self.add_member(node)

        self.hull: List[Point] = []
        self.center: Point = ORIGIN
        self.radius: float = 0.0
        self.forced_nodes: Set[str] = set()

    def __repr__(self) -> str:
        return (f"FolderCluster({self.folder!r}, members={len(self.members)}, "
                f"center=({self.center.x:.1f}, {self.center.y:.1f}), radius={self.radius:.1f})")

    # -------------------------------------------------------------------------
    # Membership
    # -------------------------------------------------------------------------

    def add_member(self, node: GraphNode) -> None:
        """Add a node to the folder."""
        if id(node) not in self._member_ids:
            self.members.append(node)
            self._member_ids.add(id(node))

    def is_member(self, node: GraphNode) -> bool:
        return id(node) in self._member_ids

    @property
    def repel_radius(self) -> float:
        return self.radius + self.config.margin_min

    # -------------------------------------------------------------------------
    # Geometry
    # -------------------------------------------------------------------------

    def recompute_hull(self) -> None:
        self.hull = convex_hull(node.position for node in self.members)

    def recompute_center(self) -> None:
        """Midpoint of the hull's bounding box (not the centroid)."""
        self.center = bounding_box_center(self.hull)

    def recompute_radius(self) -> None:
        """Farthest hull point from the center, plus padding."""
        self.radius = 0.0
        padding = self.config.padding
        for point in self.hull:
            r = distance(self.center, point) + padding
            if r > self.radius:
                self.radius = r

    def update(self) -> None:
        """Recompute hull, center and radius from current member positions."""
        self.recompute_hull()
        self.recompute_center()
        self.recompute_radius()

    def enclosure(self, with_polygon: Optional[bool] = None) -> Enclosure:
        """
        Drawable geometry as of the last update().

        Args:
            with_polygon: Include the exact hull polygon. Defaults to
                config.show_polygon.
        """
        if with_polygon is None:
            with_polygon = self.config.show_polygon

        polygon = None
        if with_polygon and len(self.hull) >= 3:
            polygon = sort_counter_clockwise(self.hull)

        return Enclosure(self.folder, self.center, self.radius, polygon)

    # -------------------------------------------------------------------------
    # Forces
    # -------------------------------------------------------------------------

    def force_at(self, dist: float) -> float:
        """Push strength at a given distance from the center (0 outside)."""
        repel_radius = self.repel_radius
        if repel_radius <= 0 or dist > repel_radius:
            return 0.0
        return ease_out_quad(self.config.hull_force_k, dist / repel_radius)

    def apply_force(self, node: GraphNode) -> bool:
        """
        Push a non-member node out of the puddle, or release it.

        Returns:
            True if the node was displaced this call
        """
        repel_radius = self.repel_radius
        a = node.position - self.center
        a_len = a.length()

        if not self.is_member(node) and repel_radius > 0 and a_len <= repel_radius:
            k = self.force_at(a_len)
            direction = a * (1 / a_len) if a_len > 0 else _FALLBACK_DIRECTION
            node.move_to(node.position + direction * k)

            self._channel.send(PinNode(node.node_id, node.x, node.y))
            self._channel.request_redraw()
            self.forced_nodes.add(node.node_id)
            return True

        if node.node_id in self.forced_nodes:
            self._release(node.node_id)

        return False

    def release_all(self) -> int:
        """
        Hand every node this cluster still holds back to native forces.

        Returns:
            Number of nodes released
        """
        released = 0
        for node_id in list(self.forced_nodes):
            self._release(node_id)
            released += 1
        return released

    def _release(self, node_id: str) -> None:
        self._channel.send(UnpinNode(node_id))
        self._channel.request_redraw()
        self.forced_nodes.discard(node_id)
