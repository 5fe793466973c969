"""
Services for FolderGraph.

Geometry kernel, folder clusters, the per-session registry, the shared
membership index and the vault scanner.
"""

from .cluster import FolderCluster
from .registry import ClusterRegistry, build_clusters
from .membership import MembershipIndex
from .scanner import VaultScanner, ScanResult

__all__ = [
    "FolderCluster",
    "ClusterRegistry",
    "build_clusters",
    "MembershipIndex",
    "VaultScanner",
    "ScanResult",
]
