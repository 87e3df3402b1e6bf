"""Dialogs driving action resolution, slot filling and dispatch."""

from actionbind.dialogs.action_dialog import ActionDialog
from actionbind.dialogs.confirmation import is_affirmative
from actionbind.dialogs.frames import DialogSession, SlotFillingFrame
from actionbind.dialogs.slot_filling import SlotFillingDialog, SlotFillingStack

__all__ = [
    "ActionDialog",
    "DialogSession",
    "SlotFillingDialog",
    "SlotFillingFrame",
    "SlotFillingStack",
    "is_affirmative",
]
