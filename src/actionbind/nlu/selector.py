"""Winning intent selection across NLU service results."""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from actionbind.core.constants import NONE_INTENT
from actionbind.core.errors import NoWinningIntentError
from actionbind.core.interfaces import INLUService
from actionbind.nlu.models import IntentCandidate, NluResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceResult:
    """A service's result together with its best qualifying intent."""

    result: NluResult
    best_intent: IntentCandidate
    service: INLUService


class WinnerSelector:
    """Pick the best intent per service, then the best service result.

    Args:
        min_score: Candidates scoring below this do not qualify
        none_intent: Sentinel intent name meaning "nothing recognized"
    """

    def __init__(self, min_score: float = 0.0, none_intent: str = NONE_INTENT) -> None:
        self.min_score = min_score
        self.none_intent = none_intent

    def best_intent_from(self, result: NluResult) -> IntentCandidate | None:
        """Best qualifying intent of one service result, if any."""
        best = result.top_scoring_intent
        if best is None and result.intents:
            best = max(result.intents, key=lambda intent: intent.score)
        if best is None or best.name == self.none_intent or best.score < self.min_score:
            return None
        return best

    def best_result_from(self, results: Iterable[ServiceResult]) -> ServiceResult | None:
        """Highest-scoring service result; ties keep the earliest service."""
        winner: ServiceResult | None = None
        for candidate in results:
            if winner is None or candidate.best_intent.score > winner.best_intent.score:
                winner = candidate
        return winner

    def select(
        self,
        results: Sequence[NluResult],
        services: Sequence[INLUService],
    ) -> ServiceResult:
        """Select the overall winner of a fan-out.

        Raises:
            NoWinningIntentError: If no service has a qualifying intent
        """
        service_results = []
        for result, service in zip(results, services, strict=True):
            best = self.best_intent_from(result)
            if best is None:
                logger.debug(f"Service '{service.name}' has no qualifying intent")
                continue
            service_results.append(ServiceResult(result=result, best_intent=best, service=service))

        winner = self.best_result_from(service_results)
        if winner is None:
            raise NoWinningIntentError(
                "No winning intent selected from NLU results.",
                query=results[0].query if results else "",
            )

        logger.debug(f"Winning intent {winner.best_intent} from service '{winner.service.name}'")
        return winner
