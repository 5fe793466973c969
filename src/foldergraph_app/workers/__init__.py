"""
Background worker threads for FolderGraph.

The simulation runs in its own QThread and is reached only through
force messages.
"""

from .force_channel import QtForceChannel, ChannelSignals
from .simulation_worker import ForceSimulationWorker

__all__ = [
    "QtForceChannel",
    "ChannelSignals",
    "ForceSimulationWorker",
]
