"""Per-turn dialog context."""

from dataclasses import dataclass, field

from actionbind.core.message_sink import MessageSink


@dataclass
class TurnContext:
    """Context handed to dialogs and handlers for one inbound message.

    Posted messages are forwarded to the sink and collected in ``messages``
    so callers can return them as the turn's reply.
    """

    conversation_id: str
    sink: MessageSink
    messages: list[str] = field(default_factory=list)

    async def post(self, text: str) -> None:
        self.messages.append(text)
        await self.sink.send(text)
