"""NLU querying and winner selection.

The DSPy-backed service lives in ``actionbind.nlu.dspy_service`` and is not
imported here so the engine can run without configuring an LM.
"""

from actionbind.nlu.fanout import NluQueryFanout
from actionbind.nlu.models import Entity, IntentCandidate, NluResult
from actionbind.nlu.selector import ServiceResult, WinnerSelector

__all__ = [
    "Entity",
    "IntentCandidate",
    "NluQueryFanout",
    "NluResult",
    "ServiceResult",
    "WinnerSelector",
]
