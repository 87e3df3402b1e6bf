"""Intent handlers for the travel booking example"""

import logging
from typing import Any

from actionbind import HandlerTable
from actionbind.core.interfaces import IDialogContext

logger = logging.getLogger(__name__)

handlers = HandlerTable.get_default()


@handlers.handler("BookFlight", "CancelFlight", "FindHotels")
async def post_result(context: IDialogContext, message: str, result: Any) -> None:
    """Relay the fulfillment result to the user."""
    await context.post(str(result))


@handlers.handler("")
async def fallback(context: IDialogContext, result: Any) -> None:
    logger.warning(f"No dedicated handler for result {result!r}")
    await context.post("Done.")
