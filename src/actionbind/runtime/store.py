"""In-memory session store with expiry."""

import logging

from cachetools import TTLCache

from actionbind.config.models import SessionConfig
from actionbind.dialogs.frames import DialogSession

logger = logging.getLogger(__name__)


class SessionStore:
    """Keep one ``DialogSession`` per conversation.

    Sessions idle for longer than the configured TTL are dropped, as are the
    least recently used ones once ``max_sessions`` is reached.
    """

    def __init__(self, config: SessionConfig | None = None) -> None:
        config = config if config is not None else SessionConfig()
        self._sessions: TTLCache[str, DialogSession] = TTLCache(
            maxsize=config.max_sessions, ttl=config.ttl_seconds
        )

    def get_or_create(self, conversation_id: str) -> DialogSession:
        session = self._sessions.get(conversation_id)
        if session is None:
            logger.debug(f"Creating new session for conversation {conversation_id}")
            session = DialogSession(conversation_id=conversation_id)
        # Re-insert to refresh the expiry on every access
        self._sessions[conversation_id] = session
        return session

    def reset(self, conversation_id: str) -> None:
        """Forget a conversation's slot-filling state."""
        self._sessions.pop(conversation_id, None)
        logger.debug(f"Reset session for conversation {conversation_id}")

    def __contains__(self, conversation_id: object) -> bool:
        return conversation_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
