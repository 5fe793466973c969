"""
Main window for FolderGraph.

Scans a folder into the membership index and shows it as a graph with
folder puddles.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from PyQt6.QtWidgets import QMainWindow, QFileDialog, QLabel
from PyQt6.QtGui import QAction

from foldergraph_core.adapters.local_vault import LocalVault
from foldergraph_core.config import ClusterConfig
from foldergraph_core.domain.models import FileEntry
from foldergraph_core.services.membership import MembershipIndex
from foldergraph_core.services.scanner import VaultScanner

from .graph import FolderGraphCanvas

logger = logging.getLogger(__name__)


def build_links(files: List[FileEntry]) -> List[Tuple[str, str]]:
    """
    Derive simulation links from the folder tree.

    Files of the same folder are chained, and the first file of every
    folder is linked to the first file of its parent folder.
    """
    by_folder: Dict[str, List[str]] = {}
    for f in files:
        folder = f.parent.path if f.parent is not None else "/"
        by_folder.setdefault(folder, []).append(f.path)

    links: List[Tuple[str, str]] = []
    for folder, paths in by_folder.items():
        links.extend(zip(paths, paths[1:]))

        parent = folder.rsplit("/", 1)[0] if "/" in folder else "/"
        while parent not in by_folder and parent not in ("/", ""):
            parent = parent.rsplit("/", 1)[0] if "/" in parent else "/"
        if folder != "/" and parent in by_folder:
            links.append((paths[0], by_folder[parent][0]))

    return links


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, config: Optional[ClusterConfig] = None):
        super().__init__()

        self.setWindowTitle("FolderGraph")
        self.resize(1100, 800)

        self.membership = MembershipIndex()
        self.canvas = FolderGraphCanvas(self, config)
        self.setCentralWidget(self.canvas)

        self._status_label = QLabel("No folder loaded")
        self.statusBar().addPermanentWidget(self._status_label)

        open_action = QAction("Open Folder...", self)
        open_action.triggered.connect(self._on_open_folder)
        self.menuBar().addMenu("File").addAction(open_action)

    def load_folder(self, path: str):
        """Scan a folder and start a graph session for it."""
        vault = LocalVault(path)

        self.membership.init()
        files: List[FileEntry] = []

        def collect(entry):
            if isinstance(entry, FileEntry):
                files.append(entry)

        result = VaultScanner(vault, self.membership).scan(on_entry=collect)
        self.canvas.load_graph([f.path for f in files], build_links(files), self.membership)

        folders = len(self.canvas.registry) if self.canvas.registry else 0
        self._status_label.setText(
            f"{Path(path).name}: {result.files:,} files, {folders:,} puddles"
            + (f", {result.errors} unreadable folders" if result.errors else "")
        )
        self.setWindowTitle(f"FolderGraph - {Path(path).name}")

    def _on_open_folder(self):
        path = QFileDialog.getExistingDirectory(self, "Open Folder")
        if path:
            self.load_folder(path)

    def closeEvent(self, event):
        self.canvas.close_session()
        super().closeEvent(event)
