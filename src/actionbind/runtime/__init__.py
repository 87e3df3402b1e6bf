"""Conversation runtime."""

from actionbind.runtime.context import TurnContext
from actionbind.runtime.runtime import ConversationRuntime
from actionbind.runtime.store import SessionStore

__all__ = ["ConversationRuntime", "SessionStore", "TurnContext"]
