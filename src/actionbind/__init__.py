"""actionbind - bind NLU intents to actions and fill their parameters.

Actions are pydantic models bound to intents with ``@action_binding``.
An ``ActionDialog`` queries the configured NLU services, resolves the
winning intent into an action, prompts for missing parameters over as
many turns as needed and dispatches the fulfilled result to the handler
registered for the intent.

Quick start:
    from actionbind import Action, ActionDialog, ConversationRuntime, Param, action_binding

    @action_binding("BookFlight", friendly_name="Book a flight")
    class BookFlight(Action):
        destination: str | None = Param("Where do you want to fly to?")

        async def fulfill(self) -> str:
            return f"Booked a flight to {self.destination}"

    runtime = ConversationRuntime(ActionDialog([my_nlu_service], handlers=table))
    replies = await runtime.process_message("Book a flight", "user-1")
"""

from actionbind.__version__ import __version__
from actionbind.actions import (
    Action,
    ActionRegistry,
    ContextualAction,
    Param,
    action_binding,
)
from actionbind.config import ActionBindConfig, ConfigLoader
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
from actionbind.dialogs import ActionDialog, DialogSession
from actionbind.handlers import HandlerTable, intent_handler
from actionbind.nlu import Entity, IntentCandidate, NluResult, WinnerSelector
from actionbind.runtime import ConversationRuntime, SessionStore

__all__ = [
    "__version__",
    "Action",
    "ActionBindConfig",
    "ActionDialog",
    "ActionRegistry",
    "ConfigLoader",
    "ContextualAction",
    "ConversationRuntime",
    "DialogSession",
    "Entity",
    "HandlerTable",
    "IntentCandidate",
    "NluResult",
    "Param",
    "SessionStore",
    "WinnerSelector",
    "action_binding",
    "intent_handler",
    "ActionBindError",
    "ActionError",
    "ConfigError",
    "HandlerNotFoundError",
    "InvalidIntentHandlerError",
    "NLUError",
    "NLUProviderError",
    "NoWinningIntentError",
    "StateError",
]
