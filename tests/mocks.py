"""Deterministic NLU services for tests (no LLM calls)."""

from actionbind.core.constants import NONE_INTENT
from actionbind.nlu.models import Entity, IntentCandidate, NluResult


def nlu_result(
    query: str,
    intent: str = NONE_INTENT,
    score: float = 0.9,
    entities: dict[str, str] | None = None,
) -> NluResult:
    """Build a single-intent NluResult with query-level entities."""
    candidate = IntentCandidate(name=intent, score=score)
    return NluResult(
        query=query,
        intents=[candidate],
        top_scoring_intent=candidate,
        entities=[Entity(type=key, value=value) for key, value in (entities or {}).items()],
    )


class ScriptedNLUService:
    """NLU service answering from a text -> result script.

    Lookups are case-insensitive. Unscripted text yields the "None" intent
    with no entities, so replies are bound as raw text.
    """

    def __init__(self, name: str = "default") -> None:
        self.name = name
        self.script: dict[str, NluResult] = {}
        self.queries: list[str] = []

    def add(
        self,
        text: str,
        intent: str = NONE_INTENT,
        score: float = 0.9,
        **entities: str,
    ) -> "ScriptedNLUService":
        self.script[text.lower()] = nlu_result(text, intent, score, entities)
        return self

    async def query(self, text: str) -> NluResult:
        self.queries.append(text)
        result = self.script.get(text.lower())
        if result is None:
            return nlu_result(text)
        return result


class FailingNLUService:
    """NLU service whose transport always fails."""

    def __init__(self, name: str = "broken") -> None:
        self.name = name

    async def query(self, text: str) -> NluResult:
        raise ConnectionError("service unavailable")
