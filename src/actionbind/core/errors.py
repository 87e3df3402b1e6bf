"""Core resolution and dispatch errors."""

from typing import Any


class ActionBindError(Exception):
    """Base class for all actionbind errors.

    Keyword arguments are kept as context and rendered after the message.
    """

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{self.message} ({details})"


class ConfigError(ActionBindError):
    """Raised when configuration is invalid."""


class InvalidIntentHandlerError(ConfigError):
    """Raised when a handler bound to an intent has an unusable signature."""


class ActionError(ActionBindError):
    """Raised when an action type is bound or used incorrectly."""

    pass


class StateError(ActionBindError):
    """Raised when a dialog session is not in a state that can take the message."""

    pass


class NLUError(ActionBindError):
    """Raised when NLU processing fails."""

    pass


class NLUProviderError(NLUError):
    """Error from the underlying NLU service."""

    pass


class NoWinningIntentError(NLUError):
    """No service returned a qualifying intent for the utterance."""

    pass


class HandlerNotFoundError(ActionBindError):
    """Neither an intent handler nor a default handler is registered."""

    pass
