"""Conversation runtime: routes messages to the dialog per conversation."""

from actionbind.core.message_sink import BufferedMessageSink, MessageSink
from actionbind.dialogs.action_dialog import ActionDialog
from actionbind.observability.logging import ContextLogger
from actionbind.runtime.context import TurnContext
from actionbind.runtime.store import SessionStore

logger = ContextLogger(__name__)


class ConversationRuntime:
    """Process messages of many conversations with one dialog.

    Each conversation keeps its own slot-filling session. A failed turn
    resets that conversation's session and re-raises, so the next message
    starts a fresh resolution.
    """

    def __init__(
        self,
        dialog: ActionDialog,
        sink: MessageSink | None = None,
        store: SessionStore | None = None,
    ) -> None:
        self.dialog = dialog
        self.sink = sink if sink is not None else BufferedMessageSink()
        self.store = store if store is not None else SessionStore()

    async def process_message(self, text: str, conversation_id: str = "default") -> list[str]:
        """Process one message and return the messages posted during the turn.

        Args:
            text: User message
            conversation_id: Conversation the message belongs to

        Raises:
            ActionBindError: Whatever the dialog raised; the session is reset
        """
        log = logger.with_context(conversation_id=conversation_id)
        session = self.store.get_or_create(conversation_id)
        context = TurnContext(conversation_id=conversation_id, sink=self.sink)

        try:
            await self.dialog.handle_message(context, text, session)
        except Exception:
            log.error(f"Turn failed for conversation {conversation_id}", exc_info=True)
            self.store.reset(conversation_id)
            raise

        log.debug(f"Turn complete, {len(session.frames)} frame(s) pending")
        return context.messages
