"""
Cluster registry - all folder puddles of one graph session.

Built once when a graph view is opened. Every frame the host calls tick()
(or update() then apply_forces()) from its render callback.
"""

import logging
from typing import Dict, Iterator, List, Optional, Sequence

from ..config import ClusterConfig
from ..domain.models import GraphNode, Enclosure
from ..ports.force_port import ForceChannel
from .cluster import FolderCluster
from .membership import MembershipIndex

logger = logging.getLogger(__name__)


class ClusterRegistry:
    """
    Maps folder path -> FolderCluster for one session.

    Clusters keep the order in which their folder was first seen. When two
    puddles overlap, the later cluster's push wins for that frame.
    """

    def __init__(
        self,
        nodes: Sequence[GraphNode],
        channel: ForceChannel,
        config: Optional[ClusterConfig] = None,
    ):
        self._nodes = nodes
        self._channel = channel
        self.config = config or ClusterConfig()
        self._clusters: Dict[str, FolderCluster] = {}

    @classmethod
    def build(
        cls,
        nodes: Sequence[GraphNode],
        membership: MembershipIndex,
        channel: ForceChannel,
        config: Optional[ClusterConfig] = None,
    ) -> "ClusterRegistry":
        """
        Create one cluster per folder that has at least one node in the graph.

        Args:
            nodes: Nodes currently known to the renderer (kept by reference)
            membership: File path -> folder lookup
            channel: Where pin/unpin commands go
            config: Geometry and force parameters

        Returns:
            The session's registry
        """
        registry = cls(nodes, channel, config)

        for node in nodes:
            folder = membership.lookup(node.node_id)
            if folder is None:
                continue

            cluster = registry._clusters.get(folder)
            if cluster is None:
                cluster = FolderCluster(folder, channel, registry.config)
                registry._clusters[folder] = cluster
            cluster.add_member(node)

        logger.debug("Built %d folder clusters from %d nodes", len(registry._clusters), len(nodes))
        return registry

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._clusters)

    def __iter__(self) -> Iterator[FolderCluster]:
        return iter(list(self._clusters.values()))

    def __contains__(self, folder: str) -> bool:
        return folder in self._clusters

    @property
    def folders(self) -> List[str]:
        return list(self._clusters)

    @property
    def nodes(self) -> Sequence[GraphNode]:
        return self._nodes

    def cluster_for(self, folder: str) -> Optional[FolderCluster]:
        return self._clusters.get(folder)

    # -------------------------------------------------------------------------
    # Per-frame pass
    # -------------------------------------------------------------------------

    def update(self) -> None:
        """Recompute hull, center and radius of every cluster."""
        for cluster in self._clusters.values():
            try:
                cluster.update()
            except Exception:
                logger.exception("Failed to update puddle of %r", cluster.folder)

    def apply_forces(self, drag_node_id: Optional[str] = None) -> int:
        """
        Apply every cluster's force to every node except the dragged one.

        Args:
            drag_node_id: Node the user is dragging (left alone)

        Returns:
            Number of displacements applied
        """
        displaced = 0
        pushed_by: Dict[str, List[str]] = {}

        for node in self._nodes:
            if drag_node_id is not None and node.node_id == drag_node_id:
                continue
            for cluster in self._clusters.values():
                try:
                    if cluster.apply_force(node):
                        displaced += 1
                        pushed_by.setdefault(node.node_id, []).append(cluster.folder)
                except Exception:
                    logger.exception("Failed to apply force of %r to node %r",
                                     cluster.folder, node.node_id)

        for node_id, folders in pushed_by.items():
            if len(folders) > 1:
                logger.debug("Node %r pushed by overlapping puddles %s", node_id, folders)

        return displaced

    def tick(self, drag_node_id: Optional[str] = None) -> int:
        """Run one frame: geometry first, then forces."""
        self.update()
        return self.apply_forces(drag_node_id)

    def enclosures(self, with_polygon: Optional[bool] = None) -> List[Enclosure]:
        """Geometry of every puddle for drawing."""
        return [cluster.enclosure(with_polygon) for cluster in self._clusters.values()]

    def teardown(self) -> int:
        """
        Release every node still held by any cluster.

        Returns:
            Number of nodes released
        """
        released = 0
        for cluster in self._clusters.values():
            released += cluster.release_all()
        if released:
            logger.debug("Released %d forced nodes on teardown", released)
        return released


def build_clusters(
    nodes: Sequence[GraphNode],
    membership: MembershipIndex,
    channel: ForceChannel,
    config: Optional[ClusterConfig] = None,
) -> ClusterRegistry:
    """Build the registry for a new graph session."""
    return ClusterRegistry.build(nodes, membership, channel, config)
