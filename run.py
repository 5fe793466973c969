#!/usr/bin/env python
"""
Convenience script to run FolderGraph during development.

Usage:
    python run.py [folder]

Crashes are appended to crash_log.txt by the exception hook that
foldergraph_app.__main__ installs.
"""

import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent / "src"
sys.path.insert(0, str(src_path))

if __name__ == "__main__":
    from foldergraph_app.__main__ import main
    main()
