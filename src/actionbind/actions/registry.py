"""Action registry mapping intent names to action types."""

import logging
from collections.abc import Callable
from typing import TypeVar

from actionbind.actions.base import (
    Action,
    ActionDescriptor,
    ContextualAction,
    bind_descriptor,
    collect_parameters,
)
from actionbind.core.errors import ActionError

logger = logging.getLogger(__name__)

ActionT = TypeVar("ActionT", bound=type[Action])


class ActionRegistry:
    """Registry of action types by intent name.

    Populated at import time through ``@action_binding`` and read-only while
    conversations run.

    Usage:
        registry = ActionRegistry()

        @action_binding("BookFlight", registry=registry)
        class BookFlight(Action):
            ...

        registry.get("BookFlight")  # -> BookFlight
    """

    _default_instance: "ActionRegistry | None" = None

    def __init__(self) -> None:
        self._actions: dict[str, type[Action]] = {}

    @classmethod
    def get_default(cls) -> "ActionRegistry":
        """Get the default global registry instance."""
        if cls._default_instance is None:
            cls._default_instance = cls()
        return cls._default_instance

    def register(self, action_type: type[Action]) -> None:
        """Register a bound action type under all its intent names.

        Raises:
            ActionError: If an intent is already bound to another type
        """
        descriptor = action_type.descriptor()
        for intent in descriptor.intent_names:
            existing = self._actions.get(intent)
            if existing is not None and existing is not action_type:
                raise ActionError(
                    f"Intent '{intent}' is already bound to {existing.__name__}",
                    action=action_type.__name__,
                )
            self._actions[intent] = action_type
        logger.debug(
            f"Registered action {action_type.__name__} for {list(descriptor.intent_names)}"
        )

    def get(self, intent: str) -> type[Action] | None:
        return self._actions.get(intent)

    def descriptor_for(self, intent: str) -> ActionDescriptor | None:
        action_type = self._actions.get(intent)
        return action_type.descriptor() if action_type is not None else None

    def intents(self) -> list[str]:
        return list(self._actions)

    def action_types(self) -> list[type[Action]]:
        """Registered action types, without duplicates, in registration order."""
        return list(dict.fromkeys(self._actions.values()))

    def __contains__(self, intent: str) -> bool:
        return intent in self._actions

    def __len__(self) -> int:
        return len(self._actions)


def action_binding(
    *intent_names: str,
    friendly_name: str | None = None,
    description: str = "",
    context: type[Action] | None = None,
    can_start_with_no_context: bool = True,
    confirm_on_switching_context: bool = True,
    registry: ActionRegistry | None = None,
) -> Callable[[ActionT], ActionT]:
    """Class decorator binding an action type to one or more intents.

    Args:
        intent_names: Intents resolving to this action; the first is primary
        friendly_name: Name used in user-facing messages (defaults to the
            class name)
        description: What the action does (used by LLM-backed NLU)
        context: Parent action type for contextual actions
        can_start_with_no_context: Whether a contextual action may start
            with a freshly built parent when there is none
        confirm_on_switching_context: Ask the user before abandoning this
            action for another one mid-prompt
        registry: Target registry (defaults to the global one)
    """

    def decorator(action_type: ActionT) -> ActionT:
        if not intent_names:
            raise ActionError(f"{action_type.__name__} must be bound to at least one intent")
        if context is not None and not issubclass(action_type, ContextualAction):
            raise ActionError(
                f"{action_type.__name__} declares a context but is not a ContextualAction"
            )
        if context is None and issubclass(action_type, ContextualAction):
            raise ActionError(f"Contextual action {action_type.__name__} must declare a context")

        descriptor = ActionDescriptor(
            action_type=action_type,
            intent_names=tuple(intent_names),
            friendly_name=friendly_name or action_type.__name__,
            description=description or (action_type.__doc__ or "").strip(),
            parameters=collect_parameters(action_type),
            context_type=context,
            can_start_with_no_context=can_start_with_no_context,
            confirm_on_switching_context=confirm_on_switching_context,
        )
        bind_descriptor(descriptor)
        (registry if registry is not None else ActionRegistry.get_default()).register(action_type)
        return action_type

    return decorator
