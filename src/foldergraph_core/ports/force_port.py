"""
Force channel port interface.

Defines the contract for talking to the external simulation. The channel is
fire-and-forget: nothing is acknowledged and nothing is guaranteed to be
applied before the next frame.
"""

from abc import ABC, abstractmethod
from typing import Union

from ..domain.models import PinNode, UnpinNode


ForceCommand = Union[PinNode, UnpinNode]


class ForceChannel(ABC):
    """
    Abstract outbound channel to the simulation.

    Implementations MUST NOT block and MUST treat pin/unpin as idempotent
    by node id, so that commands from a torn-down session are harmless.
    """

    @abstractmethod
    def send(self, command: ForceCommand) -> None:
        """
        Post a command to the simulation.

        Args:
            command: PinNode or UnpinNode
        """
        pass

    @abstractmethod
    def request_redraw(self) -> None:
        """Ask the host renderer to draw another frame."""
        pass
