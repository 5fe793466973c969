"""
Main entry point for FolderGraph.

Usage:
    python -m foldergraph_app [folder]
    foldergraph [folder]  (if installed)
"""

import argparse
import logging
import sys
import traceback
from pathlib import Path
from datetime import datetime


def setup_exception_hook():
    """Setup global exception hook to catch Qt exceptions."""
    log_file = Path.cwd() / "crash_log.txt"

    def exception_hook(exctype, value, tb):
        # Write to log file
        error_msg = ''.join(traceback.format_exception(exctype, value, tb))
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(f"\n{'='*60}\n")
            f.write(f"UNHANDLED EXCEPTION at {datetime.now()}\n")
            f.write(f"{'='*60}\n")
            f.write(error_msg)
            f.write("\n")

        logging.getLogger("foldergraph").critical(
            "Unhandled exception, log saved to %s\n%s", log_file, error_msg)

        # Call default handler
        sys.__excepthook__(exctype, value, tb)

    sys.excepthook = exception_hook


def main():
    """Launch the FolderGraph application."""
    parser = argparse.ArgumentParser(description="Show a folder as a graph with folder puddles")
    parser.add_argument("folder", nargs="?", help="Folder to open")
    parser.add_argument("--polygon", action="store_true", help="Also draw the exact hull polygons")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    setup_exception_hook()

    # Ensure src is in path for development
    src_path = Path(__file__).parent.parent
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))

    from PyQt6.QtWidgets import QApplication

    from foldergraph_core.config import ClusterConfig
    from foldergraph_app.views.main_window import MainWindow

    app = QApplication(sys.argv[:1])
    app.setStyle("Fusion")
    app.setApplicationName("FolderGraph")

    window = MainWindow(ClusterConfig(show_polygon=args.polygon))
    window.show()
    if args.folder:
        window.load_folder(args.folder)

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
