"""Intent to action resolution and contextual chain expansion."""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from actionbind.actions.base import Action, ActionDescriptor
from actionbind.actions.registry import ActionRegistry
from actionbind.core.errors import ActionError
from actionbind.nlu.models import Entity, IntentCandidate
from actionbind.resolution.models import ExecutionContext

logger = logging.getLogger(__name__)


@dataclass
class ContextExpansion:
    """Execution-context chain built for a resolved action.

    ``chain`` is ancestor-first. When a contextual action cannot start
    without an existing context, ``blocked_by`` names it and the chain is
    incomplete.
    """

    chain: list[ExecutionContext] = field(default_factory=list)
    blocked_by: ActionDescriptor | None = None

    @property
    def blocked(self) -> bool:
        return self.blocked_by is not None


class ActionResolver:
    """Turns intents into action instances and checks contextual rules."""

    def __init__(self, registry: ActionRegistry | None = None) -> None:
        self.registry = registry if registry is not None else ActionRegistry.get_default()

    def resolve_action_from_intent(
        self,
        intent: IntentCandidate,
        entities: Iterable[Entity] = (),
    ) -> tuple[str, Action] | None:
        """Instantiate the action bound to an intent and bind its entities.

        Args:
            intent: Winning intent candidate
            entities: Extra query-level entities (bound after the intent's own)

        Returns:
            (intent name, action) or None if no action is bound to the intent
        """
        action_type = self.registry.get(intent.name)
        if action_type is None:
            logger.debug(f"No action bound to intent '{intent.name}'")
            return None

        action = action_type()
        bound = self.bind_entities(action, [*intent.entities, *entities])
        logger.debug(f"Resolved intent '{intent.name}' to {action_type.__name__}, bound {bound}")
        return intent.name, action

    @staticmethod
    def bind_entities(action: Action, entities: Iterable[Entity]) -> list[str]:
        """Bind the first matching entity to each parameter.

        Returns:
            Names of the parameters that received a value
        """
        entities = list(entities)
        bound = []
        for param in action.descriptor().parameters:
            for entity in entities:
                if param.matches(entity.type) and action.assign(param.name, entity.value):
                    bound.append(param.name)
                    break
        return bound

    @staticmethod
    def get_action_descriptor(action: Action) -> ActionDescriptor:
        return action.descriptor()

    @staticmethod
    def is_contextual(action: Action | None) -> bool:
        return action is not None and action.descriptor().contextual

    @staticmethod
    def can_start_with_no_context(action: Action) -> bool:
        return action.descriptor().can_start_with_no_context

    def build_context_for_contextual_action(self, action: Action) -> tuple[str, Action]:
        """Create a fresh parent for a contextual action and link it.

        Returns:
            (parent intent name, parent action)
        """
        context_type = action.descriptor().context_type
        if context_type is None:
            raise ActionError(f"{type(action).__name__} is not a contextual action")

        parent = context_type()
        action.context = parent
        return context_type.descriptor().intent, parent

    def expand_context_chain(
        self,
        intent: str,
        action: Action,
        on_context_creation: Callable[[Action], None] | None = None,
    ) -> ContextExpansion:
        """Build the ancestor-first execution-context chain of an action.

        Every required parent context is built and inserted in front of the
        action depending on it, until a non-contextual root is reached.

        Args:
            intent: Intent of the resolved action
            action: Resolved action
            on_context_creation: Called with each freshly built parent so the
                caller can hydrate it with request data
        """
        expansion = ContextExpansion(chain=[ExecutionContext(intent=intent, action=action)])
        current = action
        while self.is_contextual(current):
            if not self.can_start_with_no_context(current):
                expansion.blocked_by = current.descriptor()
                logger.debug(f"{type(current).__name__} cannot start without a context")
                return expansion

            parent_intent, parent = self.build_context_for_contextual_action(current)
            if on_context_creation is not None:
                on_context_creation(parent)
            expansion.chain.insert(0, ExecutionContext(intent=parent_intent, action=parent))
            current = parent

        logger.debug(f"Execution context chain: {[entry.intent for entry in expansion.chain]}")
        return expansion

    @staticmethod
    def is_valid_contextual_action(new_action: Action, current_action: Action) -> tuple[bool, bool]:
        """Check whether new_action can run as a child of current_action.

        On success the new action's context is bound to the current action.

        Returns:
            (valid, new action is contextual)
        """
        context_type = new_action.descriptor().context_type
        if context_type is None:
            return False, False
        if not isinstance(current_action, context_type):
            return False, True
        new_action.context = current_action
        return True, True

    @staticmethod
    def update_if_valid_contextual_action(
        new_action: Action, current_action: Action
    ) -> tuple[bool, bool]:
        """Re-host new_action in the context the current action runs in.

        Non-contextual actions need no context and are always valid. A
        contextual one takes over the current action's parent when that
        parent has the type it needs.

        Returns:
            (valid, new action is contextual)
        """
        context_type = new_action.descriptor().context_type
        if context_type is None:
            return True, False

        current_context = getattr(current_action, "context", None)
        if current_context is None or not isinstance(current_context, context_type):
            return False, True
        new_action.context = current_context
        return True, True
