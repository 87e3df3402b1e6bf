"""Concurrent fan-out of one query to every configured NLU service."""

import asyncio
import logging
from collections.abc import Sequence

from actionbind.core.errors import ConfigError, NLUError, NLUProviderError
from actionbind.core.interfaces import INLUService
from actionbind.nlu.models import NluResult

logger = logging.getLogger(__name__)


class NluQueryFanout:
    """Query all services in parallel and wait for every one of them.

    There is no per-service fallback: the first failure cancels the
    queries still running and aborts the turn.
    """

    def __init__(self, services: Sequence[INLUService]) -> None:
        if not services:
            raise ConfigError("At least one NLU service is required")
        self.services = list(services)

    async def query(self, text: str) -> list[NluResult]:
        """Send text to every service.

        Returns:
            One NluResult per service, in service order

        Raises:
            NLUError: If any service fails
        """
        tasks = [asyncio.ensure_future(self._query_one(service, text)) for service in self.services]
        try:
            results = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            raise
        logger.debug(f"NLU fan-out returned {len(results)} result(s) for {text!r}")
        return list(results)

    @staticmethod
    async def _query_one(service: INLUService, text: str) -> NluResult:
        try:
            return await service.query(text)
        except NLUError:
            raise
        except Exception as e:
            logger.error(f"NLU service '{service.name}' failed: {e}", exc_info=True)
            raise NLUProviderError(f"NLU service query failed: {e}", service=service.name) from e
