"""Action base classes, parameter metadata and descriptors.

An action is a pydantic model whose parameter fields are declared with
``Param(...)``. Binding an action type to intents (see
``actionbind.actions.registry.action_binding``) freezes its metadata into an
``ActionDescriptor``.
"""

import logging
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from actionbind.core.errors import ActionError
from actionbind.validation import ValidatorRegistry

logger = logging.getLogger(__name__)

PARAMETER_KEY = "actionbind_parameter"

_descriptors: dict[type["Action"], "ActionDescriptor"] = {}


@dataclass(frozen=True)
class Parameter:
    """Metadata of one action parameter."""

    name: str
    prompt: str
    required: bool = True
    entity_types: tuple[str, ...] = ()
    validator: str | None = None
    error_message: str | None = None

    def matches(self, entity_type: str) -> bool:
        """Check if an entity of this type can fill the parameter."""
        if self.entity_types:
            return entity_type in self.entity_types
        return entity_type == self.name


@dataclass(frozen=True)
class ValidationResult:
    """A missing or invalid parameter with the message to show the user."""

    parameter: str
    message: str


@dataclass(frozen=True)
class ActionDescriptor:
    """Static metadata of an action type, built once at binding time."""

    action_type: type["Action"]
    intent_names: tuple[str, ...]
    friendly_name: str
    description: str = ""
    parameters: tuple[Parameter, ...] = ()
    context_type: type["Action"] | None = None
    can_start_with_no_context: bool = True
    confirm_on_switching_context: bool = True

    @property
    def intent(self) -> str:
        """Primary intent name (the first one bound)."""
        return self.intent_names[0]

    @property
    def contextual(self) -> bool:
        return self.context_type is not None

    def parameter(self, name: str) -> Parameter:
        for param in self.parameters:
            if param.name == name:
                return param
        raise ActionError(
            f"Action '{self.friendly_name}' has no parameter '{name}'",
            available=[p.name for p in self.parameters],
        )


def Param(
    prompt: str,
    *,
    required: bool = True,
    entity: str | list[str] | None = None,
    validator: str | None = None,
    error_message: str | None = None,
    default: Any = None,
) -> Any:
    """Declare an action parameter field.

    Args:
        prompt: Message shown to the user when the parameter is missing
        required: Whether the action is invalid without a value
        entity: Entity type name(s) that fill this parameter; defaults to
            the field name
        validator: Name of a validator in the ValidatorRegistry
        error_message: Message shown when the validator rejects the value
        default: Field default

    Returns:
        A pydantic FieldInfo carrying the parameter metadata
    """
    entity_types = [entity] if isinstance(entity, str) else list(entity or [])
    return Field(
        default=default,
        description=prompt,
        json_schema_extra={
            PARAMETER_KEY: {
                "required": required,
                "entity_types": entity_types,
                "validator": validator,
                "error_message": error_message,
            }
        },
    )


def collect_parameters(action_type: type["Action"]) -> tuple[Parameter, ...]:
    """Read Param metadata from the model fields, in declaration order."""
    parameters = []
    for name, field in action_type.model_fields.items():
        extra = field.json_schema_extra
        if not isinstance(extra, dict) or PARAMETER_KEY not in extra:
            continue
        spec = extra[PARAMETER_KEY]
        validator = spec.get("validator")
        if validator and not ValidatorRegistry.is_registered(validator):
            raise ActionError(
                f"Parameter '{name}' of {action_type.__name__} uses unknown validator",
                validator=validator,
            )
        parameters.append(
            Parameter(
                name=name,
                prompt=field.description or f"Please provide {name}",
                required=spec.get("required", True),
                entity_types=tuple(spec.get("entity_types") or ()),
                validator=validator,
                error_message=spec.get("error_message"),
            )
        )
    return tuple(parameters)


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class Action(BaseModel):
    """Base class for strongly-typed actions.

    Usage:
        @action_binding("BookFlight", friendly_name="Book a flight")
        class BookFlight(Action):
            destination: str | None = Param("Where do you want to fly to?", entity="city")

            async def fulfill(self) -> str:
                return f"Booked a flight to {self.destination}"
    """

    model_config = ConfigDict(validate_assignment=True)

    @classmethod
    def descriptor(cls) -> ActionDescriptor:
        """Return the descriptor bound to this action type.

        Raises:
            ActionError: If the type was never bound to an intent
        """
        descriptor = _descriptors.get(cls)
        if descriptor is None:
            raise ActionError(f"Action type {cls.__name__} is not bound to any intent")
        return descriptor

    @classmethod
    def is_bound(cls) -> bool:
        return cls in _descriptors

    def validate_parameters(self) -> list[ValidationResult]:
        """Validate parameter values.

        Results always follow parameter declaration order, so repeated calls
        on the same values yield the same sequence.
        """
        results: list[ValidationResult] = []
        for param in self.descriptor().parameters:
            value = getattr(self, param.name, None)
            if _is_missing(value):
                if param.required:
                    results.append(ValidationResult(param.name, param.prompt))
                continue
            if param.validator and not ValidatorRegistry.validate(param.validator, value):
                results.append(ValidationResult(param.name, param.error_message or param.prompt))
        return results

    def is_valid(self) -> bool:
        return not self.validate_parameters()

    def assign(self, name: str, value: Any) -> bool:
        """Bind a parameter value, coercing it to the field type.

        Returns:
            True if the value was accepted, False if coercion failed (the
            previous value is kept)
        """
        try:
            setattr(self, name, value)
        except PydanticValidationError as e:
            logger.debug(f"Rejected value {value!r} for {type(self).__name__}.{name}: {e}")
            return False
        return True

    async def fulfill(self) -> Any:
        """Execute the action and return its result."""
        raise NotImplementedError(f"{type(self).__name__} does not implement fulfill()")


class ContextualAction(Action):
    """Action that runs inside a parent action instance.

    The parent is available as ``context`` once the action is resolved. It
    is not part of dumps; the dialog stack keeps the parent alive.
    """

    context: Any = Field(default=None, exclude=True, repr=False)


def bind_descriptor(descriptor: ActionDescriptor) -> None:
    """Attach a descriptor to its action type."""
    _descriptors[descriptor.action_type] = descriptor
