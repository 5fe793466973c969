"""
FolderGraph App - PyQt6 graph view with folder puddles.
"""

__version__ = "0.1.0"
