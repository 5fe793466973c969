"""
FolderGraph Core - Headless engine for folder puddles in a graph layout.

This module groups graph nodes by the folder they live in, computes a soft
circular enclosure ("puddle") for every folder, and pushes foreign nodes out
of it every frame. It has no UI dependencies and can be driven by any host
that exposes node positions and accepts pin/unpin messages.
"""

__version__ = "0.1.0"
__author__ = "FolderGraph Team"

# Lazy imports to avoid loading everything at once
def __getattr__(name):
    if name == "ClusterRegistry":
        from .services.registry import ClusterRegistry
        return ClusterRegistry
    elif name == "MembershipIndex":
        from .services.membership import MembershipIndex
        return MembershipIndex
    elif name == "VaultScanner":
        from .services.scanner import VaultScanner
        return VaultScanner
    elif name == "LocalVault":
        from .adapters.local_vault import LocalVault
        return LocalVault
    elif name == "ClusterConfig":
        from .config import ClusterConfig
        return ClusterConfig
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

__all__ = [
    "__version__",
    "ClusterRegistry",
    "MembershipIndex",
    "VaultScanner",
    "LocalVault",
    "ClusterConfig",
]
