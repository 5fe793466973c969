"""
Shared fixtures for FolderGraph unit tests.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from foldergraph_core.domain.models import PinNode, UnpinNode
from foldergraph_core.ports.force_port import ForceChannel


class RecordingChannel(ForceChannel):
    """ForceChannel that keeps every command, in order."""

    def __init__(self):
        self.commands = []
        self.redraws = 0

    def send(self, command):
        self.commands.append(command)

    def request_redraw(self):
        self.redraws += 1

    @property
    def pins(self):
        return [c for c in self.commands if isinstance(c, PinNode)]

    @property
    def unpins(self):
        return [c for c in self.commands if isinstance(c, UnpinNode)]


@pytest.fixture
def channel():
    return RecordingChannel()
