"""Top-level dialog resolving utterances into actions and dispatching them."""

import logging
from collections.abc import Callable, Sequence
from typing import Any

from actionbind.actions.base import Action
from actionbind.actions.registry import ActionRegistry
from actionbind.core.errors import ConfigError, HandlerNotFoundError
from actionbind.core.interfaces import IDialogContext, INLUService
from actionbind.dialogs.frames import DialogSession, SlotFillingFrame
from actionbind.dialogs.slot_filling import SlotFillingDialog, SlotFillingStack
from actionbind.handlers.table import HandlerTable
from actionbind.nlu.fanout import NluQueryFanout
from actionbind.nlu.selector import WinnerSelector
from actionbind.resolution.extraction import ValueExtractor
from actionbind.resolution.models import ExecutionContext
from actionbind.resolution.resolver import ActionResolver

logger = logging.getLogger(__name__)

# Returns a replacement for the resolved action, or None to keep it
ActionResolvedHook = Callable[[IDialogContext, Action], Action | None]

# Hydrates a freshly built parent context with request data
ContextCreationHook = Callable[[Action, IDialogContext], None]


class ActionDialog:
    """Resolve each utterance into an action, fill its parameters, dispatch it.

    Handlers come from the ``handlers`` table and from methods of subclasses
    marked with ``@intent_handler``; both are validated at construction.

    Args:
        services: NLU services queried for every new utterance
        registry: Action registry (defaults to the global one)
        handlers: Explicit intent handler table
        selector: Winner selection policy
        on_action_resolved: Hook that may replace the resolved action
        on_context_creation: Hook hydrating built parent contexts
    """

    def __init__(
        self,
        services: Sequence[INLUService],
        registry: ActionRegistry | None = None,
        *,
        handlers: HandlerTable | None = None,
        selector: WinnerSelector | None = None,
        on_action_resolved: ActionResolvedHook | None = None,
        on_context_creation: ContextCreationHook | None = None,
    ) -> None:
        self.services = list(services)
        self.fanout = NluQueryFanout(self.services)
        self.selector = selector if selector is not None else WinnerSelector()
        self.resolver = ActionResolver(registry)
        self.extractor = ValueExtractor(self.resolver, self.selector)
        self.on_action_resolved = on_action_resolved
        self.on_context_creation = on_context_creation

        self._services_by_name = {service.name: service for service in self.services}
        if len(self._services_by_name) != len(self.services):
            raise ConfigError("NLU service names must be unique")

        self._explicit_handlers = handlers
        self._handlers = self.get_action_handlers_by_intent()

    async def handle_message(
        self, context: IDialogContext, message: str, session: DialogSession
    ) -> None:
        """Process one inbound message of a conversation."""
        if session.active:
            service_name = session.frames[0].service_name
            result = await self._stack(session).resume(context, message)
            if result is not None:
                await self.action_missing_dialog_finished(
                    context, message, session, service_name, result
                )
            return

        await self.message_received(context, message, session)

    async def message_received(
        self, context: IDialogContext, message: str, session: DialogSession
    ) -> None:
        """Resolve a new utterance.

        Raises:
            NLUError: If a service fails or no winning intent is found
            HandlerNotFoundError: If a valid action has no handler
        """
        text = await self.get_query_text(context, message)
        results = await self.fanout.query(text)
        winner = self.selector.select(results, self.services)

        resolved = self.resolver.resolve_action_from_intent(
            winner.best_intent, winner.result.entities
        )
        if resolved is None:
            await self.no_action_detected(context, message)
            return

        intent, action = resolved
        if self.on_action_resolved is not None:
            replacement = self.on_action_resolved(context, action)
            if replacement is not None:
                action = replacement

        await self._process_action(context, message, session, winner.service.name, intent, action)

    async def _process_action(
        self,
        context: IDialogContext,
        message: str,
        session: DialogSession,
        service_name: str,
        intent: str,
        action: Action,
    ) -> None:
        hydrate = None
        if self.on_context_creation is not None:
            hook = self.on_context_creation

            def hydrate(parent: Action) -> None:
                hook(parent, context)

        expansion = self.resolver.expand_context_chain(intent, action, hydrate)
        if expansion.blocked_by is not None:
            await context.post(
                f"Cannot start contextual action '{expansion.blocked_by.friendly_name}' "
                "without a valid context."
            )
            return

        if len(expansion.chain) == 1 and action.is_valid():
            await self.dispatch_to_handler(context, message, intent, action)
            return

        result = await self._stack(session).start(context, service_name, expansion.chain)
        if result is not None:
            await self.action_missing_dialog_finished(
                context, message, session, service_name, result
            )

    async def action_missing_dialog_finished(
        self,
        context: IDialogContext,
        message: str,
        session: DialogSession,
        service_name: str,
        result: ExecutionContext,
    ) -> None:
        """Dispatch the action a slot-filling flow completed.

        A root change restarts resolution with the new action at the top.
        """
        if result.change_root:
            logger.info(f"Restarting at new root action '{result.intent}'")
            await self._process_action(
                context, message, session, service_name, result.intent, result.action
            )
            return

        await self.dispatch_to_handler(context, message, result.intent, result.action)

    async def get_query_text(self, context: IDialogContext, message: str) -> str:
        return message.strip()

    async def no_action_detected(self, context: IDialogContext, message: str) -> None:
        """Called when the winning intent has no bound action."""
        logger.debug(f"No action detected for {message!r}")

    def get_action_handlers_by_intent(self) -> HandlerTable:
        """Handlers of this dialog's ``@intent_handler`` methods and the explicit table."""
        table = HandlerTable.from_dialog(self)
        if self._explicit_handlers is not None:
            table.update(self._explicit_handlers)
        return table

    async def perform_action_fulfillment(
        self, context: IDialogContext, message: str, action: Action
    ) -> Any:
        return await action.fulfill()

    async def dispatch_to_handler(
        self, context: IDialogContext, message: str, intent: str, action: Action
    ) -> None:
        """Fulfill a complete action and hand the result to its handler.

        Raises:
            HandlerNotFoundError: If neither the intent nor the default has a handler
        """
        handler = self._handlers.get(intent)
        if handler is None:
            raise HandlerNotFoundError("No default intent handler found.", intent=intent)

        result = await self.perform_action_fulfillment(context, message, action)
        logger.info(f"Dispatching '{intent}' ({type(action).__name__})")
        await handler(context, message, result)

    def _stack(self, session: DialogSession) -> SlotFillingStack:
        return SlotFillingStack(session, self._dialog_for)

    def _dialog_for(self, frame: SlotFillingFrame) -> SlotFillingDialog:
        service = self._services_by_name.get(frame.service_name)
        if service is None:
            raise ConfigError(f"Unknown NLU service '{frame.service_name}'")
        return SlotFillingDialog(frame, service, self.resolver, self.extractor)
