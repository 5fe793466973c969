"""
Local folder vault adapter.

Lists a folder on disk as a vault. Strictly read-only: only os.scandir is
used, file contents are never opened.
"""

import os
from pathlib import Path
from typing import Iterator, Union

from ..domain.models import ROOT_PATH
from ..ports.vault_port import VaultPort, VaultDirEntry


class LocalVault(VaultPort):
    """
    Read-only vault backed by a local directory.

    Vault paths are relative to the root, use "/" separators and have no
    leading slash; the root itself is "/". Hidden entries (".git",
    ".obsidian", ...) are skipped.
    """

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root).resolve()
        if not self.root.is_dir():
            raise NotADirectoryError(f"Vault root is not a directory: {self.root}")

    def _resolve(self, path: str) -> Path:
        """Turn a vault path into a disk path, refusing to leave the root."""
        if path in (ROOT_PATH, ""):
            return self.root

        resolved = (self.root / path).resolve()
        try:
            resolved.relative_to(self.root)
        except ValueError:
            raise PermissionError(f"Path {path!r} is outside the vault root {self.root}")
        return resolved

    def _to_vault_path(self, disk_path: Path) -> str:
        return disk_path.relative_to(self.root).as_posix()

    def scandir(self, path: str) -> Iterator[VaultDirEntry]:
        """Iterate over the visible entries of a vault folder, sorted by name."""
        resolved = self._resolve(path)

        if not resolved.is_dir():
            raise NotADirectoryError(f"Not a directory: {resolved}")

        with os.scandir(resolved) as it:
            entries = sorted(it, key=lambda e: e.name)

        for entry in entries:
            if entry.name.startswith("."):
                continue
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError:
                # Skip entries we can't access
                continue
            yield VaultDirEntry(
                name=entry.name,
                path=self._to_vault_path(Path(entry.path)),
                is_dir=is_dir,
            )

    def exists(self, path: str) -> bool:
        try:
            return self._resolve(path).exists()
        except PermissionError:
            return False
