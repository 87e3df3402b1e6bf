"""Parameter validation for actionbind."""

from actionbind.validation import validators  # noqa: F401  registers built-ins
from actionbind.validation.registry import ParameterValidator, ValidatorRegistry

__all__ = ["ParameterValidator", "ValidatorRegistry"]
