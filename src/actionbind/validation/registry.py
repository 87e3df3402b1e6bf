"""Thread-safe registry of named parameter validators.

Action parameters refer to validators by name so that descriptors stay
plain data; the registry resolves the name when an action is validated.
"""

import logging
from collections.abc import Callable
from threading import Lock
from typing import Any

logger = logging.getLogger(__name__)

ParameterValidator = Callable[[Any], bool]

_validators: dict[str, ParameterValidator] = {}
_validators_lock = Lock()


class ValidatorRegistry:
    """Process-wide registry mapping validator names to predicates.

    Usage:
        @ValidatorRegistry.register("city_name")
        def validate_city(value: str) -> bool:
            return value.replace(" ", "").isalpha()
    """

    @classmethod
    def register(cls, name: str) -> Callable[[ParameterValidator], ParameterValidator]:
        """Register a validator function under a semantic name."""

        def decorator(func: ParameterValidator) -> ParameterValidator:
            with _validators_lock:
                if name in _validators:
                    logger.warning(
                        f"Validator '{name}' already registered, overwriting",
                        extra={"validator_name": name},
                    )
                _validators[name] = func
            return func

        return decorator

    @classmethod
    def get(cls, name: str) -> ParameterValidator:
        """Get validator by name.

        Raises:
            ValueError: If validator is not registered
        """
        with _validators_lock:
            if name not in _validators:
                raise ValueError(
                    f"Validator '{name}' not registered. Available: {sorted(_validators)}"
                )
            return _validators[name]

    @classmethod
    def validate(cls, name: str, value: Any) -> bool:
        """Run the named validator; exceptions raised by it count as invalid."""
        validator = cls.get(name)
        try:
            return bool(validator(value))
        except (TypeError, ValueError) as e:
            logger.debug(f"Validator '{name}' rejected {value!r}: {e}")
            return False

    @classmethod
    def is_registered(cls, name: str) -> bool:
        with _validators_lock:
            return name in _validators

    @classmethod
    def list_validators(cls) -> list[str]:
        with _validators_lock:
            return sorted(_validators)

    @classmethod
    def unregister(cls, name: str) -> None:
        """Remove a validator (used by tests registering temporary validators)."""
        with _validators_lock:
            _validators.pop(name, None)
