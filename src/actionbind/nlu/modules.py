"""DSPy module for intent recognition.

Async-first design using native .acall() method.
"""

import logging

import dspy

from actionbind.nlu.signatures import IntentInfo, IntentRecognition, RecognizeIntent

logger = logging.getLogger(__name__)


class IntentRecognizer(dspy.Module):
    """Intent recognition module.

    Args:
        use_cot: Use ChainOfThought reasoning instead of a plain Predict
    """

    def __init__(self, use_cot: bool = False) -> None:
        super().__init__()
        if use_cot:
            self.predictor = dspy.ChainOfThought(RecognizeIntent)
        else:
            self.predictor = dspy.Predict(RecognizeIntent)

    async def aforward(self, query: str, intents: list[IntentInfo]) -> IntentRecognition:
        """Recognize intents and entities (async).

        Raises:
            pydantic.ValidationError: If the LM output does not fit IntentRecognition
            TypeError: If the LM output is not structured at all
        """
        prediction = await self.predictor.acall(query=query, intents=intents)
        return as_recognition(prediction.result)

    def forward(self, query: str, intents: list[IntentInfo]) -> IntentRecognition:
        """Sync version (for testing/optimization)."""
        prediction = self.predictor(query=query, intents=intents)
        return as_recognition(prediction.result)


def as_recognition(result: object) -> IntentRecognition:
    """Validate a raw DSPy output into an IntentRecognition."""
    if isinstance(result, IntentRecognition):
        return result
    if isinstance(result, dict):
        return IntentRecognition.model_validate(result)
    if hasattr(result, "model_dump") and callable(result.model_dump):
        return IntentRecognition.model_validate(result.model_dump())
    raise TypeError(f"Cannot convert result of type {type(result)} to IntentRecognition")
