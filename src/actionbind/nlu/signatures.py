"""DSPy signatures for intent recognition.

Uses Pydantic types for structured I/O and rich descriptions to guide the LLM.
"""

import dspy
from pydantic import BaseModel, Field

from actionbind.actions.registry import ActionRegistry
from actionbind.nlu.models import Entity, IntentCandidate


class ParameterInfo(BaseModel):
    """A parameter the LLM may extract as an entity."""

    name: str = Field(description="Parameter identifier")
    entity_types: list[str] = Field(description="Entity type names that fill this parameter")
    prompt: str = Field(default="", description="Question asked when the value is missing")

    def __str__(self) -> str:
        return f"{self.name} <{', '.join(self.entity_types)}>: {self.prompt}"


class IntentInfo(BaseModel):
    """An intent the LLM can classify a query into."""

    name: str = Field(description="Intent identifier")
    friendly_name: str = Field(description="Human-readable action name")
    description: str = Field(default="", description="What the action does")
    parameters: list[ParameterInfo] = Field(default_factory=list)

    def __str__(self) -> str:
        lines = [f"- {self.name} ({self.friendly_name}): {self.description}"]
        lines.extend(f"    {param}" for param in self.parameters)
        return "\n".join(lines)


class IntentRecognition(BaseModel):
    """Scored intents and entities recognized in a query."""

    intents: list[IntentCandidate] = Field(
        default_factory=list, description="Candidate intents, best first, scores in [0, 1]"
    )
    entities: list[Entity] = Field(
        default_factory=list, description="Entities found in the query, typed by entity_types"
    )


class RecognizeIntent(dspy.Signature):
    """Classify the user's query into the available intents and extract entities.

    RULES:
    1. ONLY use intent names listed in `intents`; use "None" when nothing fits
    2. Score every candidate between 0 and 1, best first
    3. Type each entity with one of the parameters' entity_types
    4. A bare value (a city, a date, a number) with no request in it is the
       "None" intent with the value as an entity
    """

    query: str = dspy.InputField(desc="User's message")
    intents: list[IntentInfo] = dspy.InputField(desc="Intents the query can be classified into")

    result: IntentRecognition = dspy.OutputField(desc="Scored intents and extracted entities")


def build_intent_catalog(registry: ActionRegistry) -> list[IntentInfo]:
    """Describe every registered intent for the recognizer prompt."""
    catalog = []
    for intent in registry.intents():
        descriptor = registry.descriptor_for(intent)
        if descriptor is None:
            continue
        catalog.append(
            IntentInfo(
                name=intent,
                friendly_name=descriptor.friendly_name,
                description=descriptor.description,
                parameters=[
                    ParameterInfo(
                        name=param.name,
                        entity_types=list(param.entity_types) or [param.name],
                        prompt=param.prompt,
                    )
                    for param in descriptor.parameters
                ],
            )
        )
    return catalog
