"""Core errors, constants and collaborator interfaces."""

from actionbind.core.constants import DEFAULT_INTENT, NONE_INTENT, FrameState
from actionbind.core.errors import (
    ActionBindError,
    ActionError,
    ConfigError,
    HandlerNotFoundError,
    InvalidIntentHandlerError,
    NLUError,
    NLUProviderError,
    NoWinningIntentError,
    StateError,
)
from actionbind.core.interfaces import IDialogContext, INLUService
from actionbind.core.message_sink import BufferedMessageSink, MessageSink

__all__ = [
    "DEFAULT_INTENT",
    "NONE_INTENT",
    "FrameState",
    "ActionBindError",
    "ActionError",
    "ConfigError",
    "HandlerNotFoundError",
    "InvalidIntentHandlerError",
    "NLUError",
    "NLUProviderError",
    "NoWinningIntentError",
    "StateError",
    "IDialogContext",
    "INLUService",
    "MessageSink",
    "BufferedMessageSink",
]
