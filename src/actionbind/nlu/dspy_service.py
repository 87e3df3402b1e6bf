"""NLU service and LM bootstrapping backed by DSPy."""

import logging

import dspy

from actionbind.actions.registry import ActionRegistry
from actionbind.config.models import NLUModelConfig
from actionbind.core.errors import NLUProviderError
from actionbind.nlu.models import NluResult
from actionbind.nlu.modules import IntentRecognizer
from actionbind.nlu.signatures import IntentInfo, build_intent_catalog

logger = logging.getLogger(__name__)


class DSPyNLUService:
    """NLU service classifying queries with an LLM through DSPy.

    The intent catalogue is read from the action registry on first use, so
    actions registered after construction are still offered to the LLM.
    """

    def __init__(
        self,
        registry: ActionRegistry | None = None,
        name: str = "default",
        use_cot: bool = False,
        recognizer: IntentRecognizer | None = None,
    ) -> None:
        self.name = name
        self.registry = registry if registry is not None else ActionRegistry.get_default()
        if recognizer is None:
            recognizer = IntentRecognizer(use_cot=use_cot)
        self.recognizer = recognizer
        self._catalog: list[IntentInfo] | None = None

    @property
    def catalog(self) -> list[IntentInfo]:
        if self._catalog is None:
            self._catalog = build_intent_catalog(self.registry)
        return self._catalog

    async def query(self, text: str) -> NluResult:
        """Classify text.

        Raises:
            NLUProviderError: If the LM call or output validation fails
        """
        try:
            recognition = await self.recognizer.aforward(query=text, intents=self.catalog)
        except Exception as e:
            raise NLUProviderError(f"Intent recognition failed: {e}", service=self.name) from e

        intents = sorted(recognition.intents, key=lambda intent: intent.score, reverse=True)
        logger.debug(f"Service '{self.name}' recognized {[str(i) for i in intents]} for {text!r}")
        return NluResult(
            query=text,
            intents=intents,
            top_scoring_intent=intents[0] if intents else None,
            entities=recognition.entities,
        )


class DSPyBootstrapper:
    """Configure DSPy's language model from NLU settings."""

    def __init__(self, config: NLUModelConfig):
        self.config = config

    @staticmethod
    def bootstrap(config: NLUModelConfig) -> dspy.LM:
        """Static helper to bootstrap DSPy from config."""
        return DSPyBootstrapper(config).configure()

    def configure(self) -> dspy.LM:
        model = f"{self.config.provider}/{self.config.model}"
        lm = dspy.LM(model, temperature=self.config.temperature)
        dspy.configure(lm=lm)
        logger.info(f"Configured DSPy with {model}")
        return lm
