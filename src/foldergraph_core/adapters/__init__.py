"""
Adapters for FolderGraph.

Implementations of the port interfaces.
"""

from .local_vault import LocalVault
from .force_channel import QueueForceChannel

__all__ = ["LocalVault", "QueueForceChannel"]
