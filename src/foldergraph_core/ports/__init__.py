"""
Ports (interfaces) for FolderGraph.

These define the contracts that adapters must implement.
This enables dependency injection and testing with mocks.
"""

from .force_port import ForceChannel, ForceCommand
from .vault_port import VaultPort, VaultDirEntry

__all__ = ["ForceChannel", "ForceCommand", "VaultPort", "VaultDirEntry"]
