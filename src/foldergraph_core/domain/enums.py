"""
Enumerations for the FolderGraph domain.
"""

from enum import Enum


class ForceAction(str, Enum):
    """What a force command asks the simulation to do with a node."""
    PIN = "pin"        # Hold the node at a given position
    UNPIN = "unpin"    # Hand the node back to native forces
