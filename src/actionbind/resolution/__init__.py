"""Action resolution and value extraction."""

from actionbind.resolution.extraction import ValueExtractor
from actionbind.resolution.models import ExecutionContext, QueryValueResult
from actionbind.resolution.resolver import ActionResolver, ContextExpansion

__all__ = [
    "ActionResolver",
    "ContextExpansion",
    "ExecutionContext",
    "QueryValueResult",
    "ValueExtractor",
]
