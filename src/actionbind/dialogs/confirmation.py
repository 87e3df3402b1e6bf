"""Yes/no reply parsing for action switch confirmations."""

import re

from actionbind.core.constants import CONFIRMATION_YES


def is_affirmative(text: str | None) -> bool:
    """True if the reply starts with an affirmative word; anything else is no."""
    if not text:
        return False
    tokens = re.sub(r"[^\w\s]", " ", text).lower().split()
    return bool(tokens) and tokens[0] in CONFIRMATION_YES
