"""
Pydantic models for NLU service results.

Results are frozen once received; the resolver only reads them.
"""

from pydantic import BaseModel, ConfigDict, Field


class Entity(BaseModel):
    """A value extracted from the utterance, tagged with a semantic role."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(description="Entity type, e.g. 'city' or 'builtin.datetime.date'")
    value: str = Field(description="Text of the extracted value")
    score: float | None = Field(default=None, description="Extraction confidence")

    def __str__(self) -> str:
        return f"{self.type}='{self.value}'"


class IntentCandidate(BaseModel):
    """A scored intent produced by one NLU service."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Intent name")
    score: float = Field(default=0.0, ge=0.0, le=1.0, description="Confidence score")
    entities: list[Entity] = Field(
        default_factory=list, description="Entities attached to this intent"
    )

    def __str__(self) -> str:
        return f"{self.name} ({self.score:.2f})"


class NluResult(BaseModel):
    """Raw response of one NLU service for one query."""

    model_config = ConfigDict(frozen=True)

    query: str = Field(default="", description="Text that was sent to the service")
    intents: list[IntentCandidate] = Field(
        default_factory=list, description="Scored intent candidates"
    )
    top_scoring_intent: IntentCandidate | None = Field(
        default=None, description="Best intent when the service reports it separately"
    )
    entities: list[Entity] = Field(
        default_factory=list, description="Entities extracted from the whole query"
    )
