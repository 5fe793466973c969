"""
Qt force channel.

Turns pin/unpin commands into signals. Connected to the simulation worker,
the messages cross into its thread without any shared state.
"""

from PyQt6.QtCore import QObject, pyqtSignal

from foldergraph_core.ports.force_port import ForceChannel, ForceCommand


class ChannelSignals(QObject):
    """
    Signals:
        force_message(dict): {"forceNode": {"id", "x", "y"}, "run": True}
        redraw_requested(): The renderer should draw another frame
    """

    force_message = pyqtSignal(dict)
    redraw_requested = pyqtSignal()


class QtForceChannel(ForceChannel):
    """ForceChannel that emits Qt signals."""

    def __init__(self, parent: QObject = None):
        self.signals = ChannelSignals(parent)
        self._enabled = True

    def close(self) -> None:
        """Stop emitting. Commands sent afterwards are dropped."""
        self._enabled = False

    def send(self, command: ForceCommand) -> None:
        if self._enabled:
            self.signals.force_message.emit(command.to_message())

    def request_redraw(self) -> None:
        if self._enabled:
            self.signals.redraw_requested.emit()
