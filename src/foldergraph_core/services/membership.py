"""
Membership index - which folder each file belongs to.

Fed by file creation events (including the burst the vault fires at load)
and read by every graph session when it builds its clusters.
"""

import logging
from typing import Dict, List, Optional, Union

from ..domain.models import FileEntry, FolderEntry

logger = logging.getLogger(__name__)


class MembershipIndex:
    """
    File path -> parent folder path.

    One entry per file, last write wins, so a file re-created under a new
    parent moves with it. There is no removal: entries for deleted files
    stay until init() is called again.
    """

    def __init__(self):
        self._file_to_folder: Dict[str, str] = {}
        self.empty_folders: List[FolderEntry] = []

    def init(self) -> None:
        """Reset the index."""
        self._file_to_folder = {}
        self.empty_folders = []

    def record_leaf(self, entry: Union[FileEntry, FolderEntry]) -> None:
        """
        Record a created vault entry.

        Files under the vault root are not part of any puddle. Empty
        folders are kept for diagnostics only.
        """
        if isinstance(entry, FileEntry):
            parent = entry.parent
            if parent is not None and not parent.is_root:
                previous = self._file_to_folder.get(entry.path)
                if previous is not None and previous != parent.path:
                    logger.debug("%s moved from %s to %s", entry.path, previous, parent.path)
                self._file_to_folder[entry.path] = parent.path
        elif isinstance(entry, FolderEntry) and len(entry.children) == 0:
            self.empty_folders.append(entry)

    def lookup(self, path: str) -> Optional[str]:
        """Folder path that owns a file, or None."""
        return self._file_to_folder.get(path)

    def files_in(self, folder: str) -> List[str]:
        return [path for path, owner in self._file_to_folder.items() if owner == folder]

    @property
    def folders(self) -> List[str]:
        """Distinct folders that own at least one file, first-seen order."""
        return list(dict.fromkeys(self._file_to_folder.values()))

    def __contains__(self, path: str) -> bool:
        return path in self._file_to_folder

    def __len__(self) -> int:
        return len(self._file_to_folder)
