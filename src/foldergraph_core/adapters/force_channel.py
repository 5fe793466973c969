"""
In-memory force channel.

Collects pin/unpin commands for a host that polls once per frame instead of
listening to a push channel. Also handy as a mock in tests.
"""

from typing import Dict, List

from ..ports.force_port import ForceChannel, ForceCommand


class QueueForceChannel(ForceChannel):
    """
    Fire-and-forget outbox.

    drain() coalesces by node id: only the last command for each node
    survives, in the order the node first appeared. Pin and unpin are
    idempotent, so dropping superseded commands changes nothing.
    """

    def __init__(self):
        self._pending: Dict[str, ForceCommand] = {}
        self._redraw = False
        self.sent_count = 0

    def send(self, command: ForceCommand) -> None:
        self._pending[command.node_id] = command
        self.sent_count += 1

    def request_redraw(self) -> None:
        self._redraw = True

    def __len__(self) -> int:
        return len(self._pending)

    def drain(self) -> List[ForceCommand]:
        """Take all pending commands."""
        commands = list(self._pending.values())
        self._pending.clear()
        return commands

    def take_redraw_request(self) -> bool:
        """Return whether a redraw was requested since the last call."""
        redraw = self._redraw
        self._redraw = False
        return redraw
