"""MessageSink interface for delivering posted messages.

The dialog host forwards every message an action dialog posts to a sink.
"""

from abc import ABC, abstractmethod


class MessageSink(ABC):
    """Interface for delivering messages to the user as they are posted."""

    @abstractmethod
    async def send(self, message: str) -> None:
        """Send a message to the user immediately."""
        ...


class BufferedMessageSink(MessageSink):
    """Buffers messages for testing or batch delivery."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    async def send(self, message: str) -> None:
        """Append message to buffer."""
        self.messages.append(message)

    def clear(self) -> None:
        """Clear the message buffer."""
        self.messages.clear()
