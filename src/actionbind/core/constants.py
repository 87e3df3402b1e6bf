"""Core constants and enums."""

from enum import Enum

# Handler table key matching any intent without its own handler
DEFAULT_INTENT = ""

# Intent name NLU services use when nothing was recognized
NONE_INTENT = "None"

CONFIRMATION_YES = frozenset(
    {"yes", "y", "yeah", "yep", "sure", "ok", "okay", "confirm", "si", "true"}
)


class FrameState(str, Enum):
    """State of a slot-filling frame on the dialog stack."""

    expand_chain = "expand_chain"
    awaiting_input = "awaiting_input"
    awaiting_confirmation = "awaiting_confirmation"
    resolving = "resolving"
    done = "done"
