"""
Vault Scanner - replays the vault as creation events.

When a vault is opened every existing entry is reported as "created". The
scanner does the same for a VaultPort so the membership index can be
filled before the first graph session is built.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Union

from ..domain.models import ROOT_PATH, FileEntry, FolderEntry
from ..ports.vault_port import VaultPort
from .membership import MembershipIndex

logger = logging.getLogger(__name__)

EntryCallback = Callable[[Union[FileEntry, FolderEntry]], None]


@dataclass
class ScanResult:
    """Summary of a scan."""
    folders: int = 0
    files: int = 0
    empty_folders: int = 0
    errors: int = 0


class VaultScanner:
    """Walks a vault depth first and reports every entry as created."""

    def __init__(self, vault: VaultPort, index: MembershipIndex):
        """
        Initialize the scanner.

        Args:
            vault: Vault adapter (must be read-only)
            index: Membership index to feed
        """
        self.vault = vault
        self.index = index

    def scan(
        self,
        root: str = ROOT_PATH,
        on_entry: Optional[EntryCallback] = None,
    ) -> ScanResult:
        """
        Scan a vault folder and everything below it.

        Args:
            root: Vault path to start at
            on_entry: Extra listener called after the index for each entry

        Returns:
            Counts of what was seen
        """
        result = ScanResult()
        self._scan_folder(FolderEntry(root), result, on_entry)
        logger.info("Scanned %d folders, %d files (%d errors)",
                    result.folders, result.files, result.errors)
        return result

    def _emit(self, entry: Union[FileEntry, FolderEntry], on_entry: Optional[EntryCallback]):
        self.index.record_leaf(entry)
        if on_entry:
            on_entry(entry)

    def _scan_folder(self, folder: FolderEntry, result: ScanResult,
                     on_entry: Optional[EntryCallback]):
        """Recursively scan a folder. Children are listed before it is reported."""
        try:
            entries = list(self.vault.scandir(folder.path))
        except OSError as e:
            logger.warning("Cannot list %s: %s", folder.path, e)
            result.errors += 1
            return

        subfolders: List[FolderEntry] = []
        files: List[FileEntry] = []
        for entry in entries:
            if entry.is_dir:
                child = FolderEntry(entry.path)
                subfolders.append(child)
                folder.children.append(child)
            else:
                child = FileEntry(entry.path, parent=folder)
                files.append(child)
                folder.children.append(child)

        result.folders += 1
        if not folder.children:
            result.empty_folders += 1
        self._emit(folder, on_entry)

        for file_entry in files:
            result.files += 1
            self._emit(file_entry, on_entry)

        for subfolder in subfolders:
            self._scan_folder(subfolder, result, on_entry)
