"""Actions module for actionbind"""

from actionbind.actions.base import (
    Action,
    ActionDescriptor,
    ContextualAction,
    Param,
    Parameter,
    ValidationResult,
)
from actionbind.actions.registry import ActionRegistry, action_binding

__all__ = [
    "Action",
    "ActionDescriptor",
    "ActionRegistry",
    "ContextualAction",
    "Param",
    "Parameter",
    "ValidationResult",
    "action_binding",
]
