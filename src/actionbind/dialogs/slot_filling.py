"""Slot-filling state machine.

A ``SlotFillingDialog`` completes the action of one frame: it prompts for
missing parameters one at a time, binds replies through the value
extractor and arbitrates when a reply asks for a different action. Nested
contextual actions run in child frames; ``SlotFillingStack`` pushes and
pops them and routes each reply to the frame on top.
"""

import logging
from collections.abc import Callable

from actionbind.actions.base import Action
from actionbind.core.constants import FrameState
from actionbind.core.errors import StateError
from actionbind.core.interfaces import IDialogContext, INLUService
from actionbind.dialogs.confirmation import is_affirmative
from actionbind.dialogs.frames import (
    CallChild,
    DialogSession,
    Finish,
    SlotFillingFrame,
    Step,
    Suspend,
)
from actionbind.resolution.extraction import ValueExtractor
from actionbind.resolution.models import ExecutionContext, QueryValueResult
from actionbind.resolution.resolver import ActionResolver

logger = logging.getLogger(__name__)


class SlotFillingDialog:
    """Transitions of a single slot-filling frame."""

    def __init__(
        self,
        frame: SlotFillingFrame,
        service: INLUService,
        resolver: ActionResolver,
        extractor: ValueExtractor,
    ) -> None:
        self.frame = frame
        self.service = service
        self.resolver = resolver
        self.extractor = extractor

    async def start(self, context: IDialogContext) -> Step:
        """Delegate the rest of the chain to a child, or start prompting."""
        chain = self.frame.take_chain()
        if chain:
            self.frame.state = FrameState.expand_chain
            return CallChild(SlotFillingFrame.from_chain(self.frame.service_name, chain))
        return await self.message_received(context, None)

    async def message_received(self, context: IDialogContext, text: str | None) -> Step:
        """Process a reply to the current prompt (or just prompt when None)."""
        frame = self.frame
        next_prompt_idx = 0
        validation_results = frame.action.validate_parameters()

        if text is not None and validation_results:
            frame.state = FrameState.resolving
            parameter = validation_results[0].parameter
            result = await self.extractor.query_value(self.service, frame.action, parameter, text)

            if result.succeeded:
                # results follow declaration order, so the next one is still missing
                next_prompt_idx += 1
            else:
                if result.proposes_switch:
                    step = await self._switch_action(
                        context, result, result.new_intent, result.new_action
                    )
                    if step is not None:
                        return step
                validation_results = frame.action.validate_parameters()

        if len(validation_results) > next_prompt_idx:
            frame.state = FrameState.awaiting_input
            await context.post(validation_results[next_prompt_idx].message)
            return Suspend()

        frame.state = FrameState.done
        logger.debug(f"Frame '{frame.intent}' complete")
        return Finish(ExecutionContext(intent=frame.intent, action=frame.action))

    async def _switch_action(
        self,
        context: IDialogContext,
        result: QueryValueResult,
        new_intent: str,
        new_action: Action,
    ) -> Step | None:
        """Arbitrate a reply that resolved to another action.

        Returns:
            The step to take, or None to keep prompting for the frame's
            (possibly replaced) action
        """
        frame = self.frame
        current = frame.action
        current_descriptor = self.resolver.get_action_descriptor(current)
        current_name = current_descriptor.friendly_name
        new_name = self.resolver.get_action_descriptor(new_action).friendly_name

        valid, new_is_contextual = self.resolver.is_valid_contextual_action(new_action, current)
        if valid:
            logger.debug(f"Running '{new_intent}' as a contextual child of '{frame.intent}'")
            frame.state = FrameState.expand_chain
            child = SlotFillingFrame.from_chain(
                frame.service_name, [ExecutionContext(intent=new_intent, action=new_action)]
            )
            return CallChild(child)

        if new_is_contextual and not self.resolver.is_contextual(current):
            await context.post(
                f"Cannot execute action '{new_name}' in the context of '{current_name}' "
                "- continuing with current action"
            )
            return None

        if type(new_action) is not type(current):
            valid, new_is_contextual = self.resolver.update_if_valid_contextual_action(
                new_action, current
            )
            if not valid and new_is_contextual:
                await context.post(
                    f"Cannot switch to action '{new_name}' from '{current_name}' "
                    "due to invalid context - continuing with current action"
                )
            elif current_descriptor.confirm_on_switching_context:
                frame.overrun = result
                frame.state = FrameState.awaiting_confirmation
                await context.post(
                    f"Do you want to discard the current action '{current_name}' "
                    f"and start executing '{new_name}' action?"
                )
                return Suspend()
            else:
                logger.debug(f"Switching '{frame.intent}' to '{new_intent}'")
                frame.intent = new_intent
                frame.action = new_action

        return None

    async def after_overrun_selected(self, context: IDialogContext, confirmed: bool) -> Step:
        """Apply or discard the switch proposed while prompting."""
        frame = self.frame
        overrun, frame.overrun = frame.overrun, None
        if overrun is None or overrun.new_action is None or overrun.new_intent is None:
            raise StateError("No action switch awaiting confirmation", intent=frame.intent)

        if confirmed:
            if self.resolver.is_contextual(frame.action) and not self.resolver.is_contextual(
                overrun.new_action
            ):
                # a root action cannot continue nested in a contextual parent
                logger.debug(f"Root change from '{frame.intent}' to '{overrun.new_intent}'")
                frame.state = FrameState.done
                return Finish(
                    ExecutionContext(
                        intent=overrun.new_intent, action=overrun.new_action, change_root=True
                    )
                )

            frame.intent = overrun.new_intent
            frame.action = overrun.new_action

        return await self.message_received(context, None)

    async def after_contextual_action_finished(
        self, context: IDialogContext, result: ExecutionContext
    ) -> Step:
        """Resume after a child frame finished."""
        frame = self.frame
        if result.change_root:
            if not self.resolver.is_contextual(frame.action):
                frame.state = FrameState.done
                return Finish(result)

            logger.debug(f"Frame '{frame.intent}' adopts root change to '{result.intent}'")
            frame.intent = result.intent
            frame.action = result.action
        else:
            fulfillment = await result.action.fulfill()
            if isinstance(fulfillment, str):
                await context.post(fulfillment)

        return await self.message_received(context, None)


DialogFactory = Callable[[SlotFillingFrame], SlotFillingDialog]


class SlotFillingStack:
    """Drive the frames of a session.

    Frames are pushed when a dialog delegates to a child and popped when it
    finishes; the parent then resumes with the child's result. The run
    stops when the top frame waits for a message, or when the root frame
    finishes and its result leaves the stack.
    """

    def __init__(self, session: DialogSession, dialog_factory: DialogFactory) -> None:
        self.session = session
        self.dialog_factory = dialog_factory

    async def start(
        self,
        context: IDialogContext,
        service_name: str,
        chain: list[ExecutionContext],
    ) -> ExecutionContext | None:
        """Start filling an execution-context chain.

        Returns:
            The finished root result, or None if waiting for input
        """
        if self.session.frames:
            raise StateError(
                "A slot-filling flow is already active",
                conversation=self.session.conversation_id,
            )
        root = SlotFillingFrame.from_chain(service_name, chain)
        return await self._run(context, CallChild(root))

    async def resume(self, context: IDialogContext, text: str) -> ExecutionContext | None:
        """Hand the next message to the frame on top of the stack."""
        if not self.session.frames:
            raise StateError(
                "No slot-filling flow to resume", conversation=self.session.conversation_id
            )

        top = self.session.frames[-1]
        dialog = self.dialog_factory(top)
        if top.state is FrameState.awaiting_confirmation:
            step = await dialog.after_overrun_selected(context, is_affirmative(text))
        elif top.state is FrameState.awaiting_input:
            step = await dialog.message_received(context, text)
        else:
            raise StateError(
                f"Frame '{top.intent}' is not waiting for a message", state=top.state.value
            )
        return await self._run(context, step)

    async def _run(self, context: IDialogContext, step: Step) -> ExecutionContext | None:
        frames = self.session.frames
        while True:
            if isinstance(step, Suspend):
                return None

            if isinstance(step, CallChild):
                frames.append(step.frame)
                logger.debug(f"Pushed frame '{step.frame.intent}' (depth {len(frames)})")
                step = await self.dialog_factory(step.frame).start(context)
                continue

            finished = frames.pop()
            logger.debug(f"Popped frame '{finished.intent}' (depth {len(frames)})")
            if not frames:
                return step.result
            step = await self.dialog_factory(frames[-1]).after_contextual_action_finished(
                context, step.result
            )
