"""Intent handler table."""

from actionbind.handlers.table import HandlerTable, IntentHandler, intent_handler

__all__ = ["HandlerTable", "IntentHandler", "intent_handler"]
