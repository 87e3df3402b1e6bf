"""Handler table mapping intent names to fulfillment-result handlers."""

import functools
import inspect
import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Any

from actionbind.core.constants import DEFAULT_INTENT
from actionbind.core.errors import InvalidIntentHandlerError
from actionbind.core.interfaces import IDialogContext

logger = logging.getLogger(__name__)

# handler(context, message, result)
IntentHandler = Callable[[IDialogContext, str, Any], Awaitable[None]]

INTENT_NAMES_ATTR = "__intent_names__"

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def intent_handler(*intent_names: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Mark a dialog method as the handler of one or more intents.

    With no names the method name is used; a blank name binds the method as
    the default handler.
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        setattr(func, INTENT_NAMES_ATTR, tuple(intent_names))
        return func

    return decorator


def normalize_intent(intent: str | None) -> str:
    if intent is None or not intent.strip():
        return DEFAULT_INTENT
    return intent


def adapt_handler(handler: Callable[..., Any], intents: Iterable[str]) -> IntentHandler:
    """Adapt a handler to the (context, message, result) shape.

    Accepts coroutine functions taking (context, message, result) or
    (context, result). Only parameters without defaults count, so
    ``(context, result, extra=None)`` is adapted like ``(context, result)``.

    Raises:
        InvalidIntentHandlerError: If the signature cannot be adapted
    """
    name = getattr(handler, "__name__", repr(handler))
    intent_list = ";".join(intents)

    if not inspect.iscoroutinefunction(handler):
        raise InvalidIntentHandlerError(
            f"Handler '{name}' must be a coroutine function", intents=intent_list
        )

    try:
        signature = inspect.signature(handler)
    except (TypeError, ValueError) as e:
        raise InvalidIntentHandlerError(
            f"Handler '{name}' signature cannot be inspected", intents=intent_list
        ) from e

    params = list(signature.parameters.values())
    positional = [p for p in params if p.kind in _POSITIONAL]
    required = [p for p in positional if p.default is p.empty]
    var_positional = any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in params)
    required_keyword = [
        p for p in params if p.kind is inspect.Parameter.KEYWORD_ONLY and p.default is p.empty
    ]

    if not required_keyword:
        if len(required) == 2:

            @functools.wraps(handler)
            async def thunk(context: IDialogContext, message: str, result: Any) -> None:
                await handler(context, result)

            return thunk
        if len(required) <= 3 and (len(positional) >= 3 or var_positional):
            return handler

    raise InvalidIntentHandlerError(
        f"Handler '{name}' signature is not valid for the following intent/s: {intent_list}",
        signature=str(signature),
    )


class HandlerTable:
    """Intent name → handler mapping with a default-intent fallback.

    Handlers are validated when registered, not when dispatched.

    Usage:
        handlers = HandlerTable()

        @handlers.handler("BookFlight")
        async def on_book_flight(context, message, result):
            await context.post(result)
    """

    _default_instance: "HandlerTable | None" = None

    def __init__(self) -> None:
        self._handlers: dict[str, IntentHandler] = {}

    @classmethod
    def get_default(cls) -> "HandlerTable":
        """Get the default global handler table."""
        if cls._default_instance is None:
            cls._default_instance = cls()
        return cls._default_instance

    def register(self, intent: str | None, handler: Callable[..., Any]) -> None:
        key = normalize_intent(intent)
        self._handlers[key] = adapt_handler(handler, [key])
        logger.debug(f"Registered handler for intent '{key or '<default>'}'")

    def handler(self, *intent_names: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Decorator registering a coroutine function for the given intents.

        With no names the function name is used.
        """

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            for intent in intent_names or (func.__name__,):
                self.register(intent, func)
            return func

        return decorator

    def get(self, intent: str) -> IntentHandler | None:
        """Look up a handler, falling back to the default-intent handler."""
        handler = self._handlers.get(intent)
        if handler is None:
            handler = self._handlers.get(DEFAULT_INTENT)
        return handler

    def update(self, other: "HandlerTable") -> None:
        self._handlers.update(other._handlers)

    def intents(self) -> list[str]:
        return list(self._handlers)

    def __contains__(self, intent: str) -> bool:
        return intent in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    @classmethod
    def from_dialog(cls, dialog: object) -> "HandlerTable":
        """Build a table from the ``@intent_handler`` methods of a dialog.

        Raises:
            InvalidIntentHandlerError: If a marked method cannot be adapted
        """
        table = cls()
        for name, member in inspect.getmembers(type(dialog), predicate=callable):
            intent_names = getattr(member, INTENT_NAMES_ATTR, None)
            if intent_names is None:
                continue
            bound = getattr(dialog, name)
            for intent in intent_names or (name,):
                table.register(intent, bound)
        return table
