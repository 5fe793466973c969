"""
Vault port interface.

Defines the contract for listing the folders and files of a vault.
All implementations MUST be read-only.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator


@dataclass
class VaultDirEntry:
    """A directory entry, path relative to the vault root."""
    name: str
    path: str
    is_dir: bool


class VaultPort(ABC):
    """
    Abstract interface for reading the vault's folder tree.

    IMPORTANT: All implementations MUST be read-only.
    """

    @abstractmethod
    def scandir(self, path: str) -> Iterator[VaultDirEntry]:
        """
        Iterate over entries in a vault folder.

        Args:
            path: Vault-relative folder path ("/" for the root)

        Yields:
            VaultDirEntry for each item in the folder

        Raises:
            OSError: If the folder cannot be listed
        """
        pass

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check if a vault path exists."""
        pass
