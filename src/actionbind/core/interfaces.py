"""Core interfaces (Protocols) consumed by the resolution engine."""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from actionbind.nlu.models import NluResult


@runtime_checkable
class INLUService(Protocol):
    """Interface for NLU services.

    A service classifies a query into scored intents and extracts entities.
    Transport and service failures are raised (NLUProviderError) and abort
    the turn.
    """

    name: str

    async def query(self, text: str) -> "NluResult":
        """Classify text and return the raw service result.

        Args:
            text: Normalized query text

        Returns:
            NluResult with scored intents and entities
        """
        ...


@runtime_checkable
class IDialogContext(Protocol):
    """Interface the dialog host exposes to action dialogs for one turn."""

    conversation_id: str

    async def post(self, text: str) -> None:
        """Post a user-visible message (fire-and-forget)."""
        ...
