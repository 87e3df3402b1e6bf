"""Answering a prompted parameter from a free-text reply."""

import logging

from actionbind.actions.base import Action
from actionbind.core.interfaces import INLUService
from actionbind.nlu.selector import WinnerSelector
from actionbind.resolution.models import QueryValueResult
from actionbind.resolution.resolver import ActionResolver

logger = logging.getLogger(__name__)


class ValueExtractor:
    """Bind a reply to the parameter being prompted, or detect a topic switch.

    The reply is sent to the NLU service that won the original utterance.
    If it resolves to an action of a different type, the switch is proposed
    instead of binding anything. Otherwise the first entity fitting the
    parameter is bound, falling back to the raw reply text.
    """

    def __init__(self, resolver: ActionResolver, selector: WinnerSelector | None = None) -> None:
        self.resolver = resolver
        self.selector = selector if selector is not None else WinnerSelector()

    async def query_value(
        self,
        service: INLUService,
        action: Action,
        parameter: str,
        text: str,
    ) -> QueryValueResult:
        """Try to fill ``parameter`` of ``action`` from ``text``.

        Raises:
            NLUError: If the service query fails
        """
        result = await service.query(text)
        best = self.selector.best_intent_from(result)

        if best is not None:
            resolved = self.resolver.resolve_action_from_intent(best, result.entities)
            if resolved is not None and type(resolved[1]) is not type(action):
                new_intent, new_action = resolved
                logger.debug(
                    f"Reply {text!r} resolved to '{new_intent}' while prompting '{parameter}'"
                )
                return QueryValueResult(new_intent=new_intent, new_action=new_action)

        param = action.descriptor().parameter(parameter)
        entities = [*(best.entities if best is not None else []), *result.entities]
        for entity in entities:
            if param.matches(entity.type) and action.assign(parameter, entity.value):
                break
        else:
            action.assign(parameter, text.strip())

        succeeded = all(r.parameter != parameter for r in action.validate_parameters())
        logger.debug(f"Value for '{parameter}' from {text!r}: succeeded={succeeded}")
        return QueryValueResult(succeeded=succeeded)
