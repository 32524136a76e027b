"""
Fetch pipeline: one GET, status check, parse, then render or show the error.
"""

from __future__ import annotations

import itertools
import logging
from typing import Any, Callable, Dict, List, Optional, Protocol

from src.catalog.display import DisplayRegion
from src.error_handler import ErrorHandler
from src.integrations.contracts.catalog import CatalogFetchError, CatalogItem, FetchOutcome, NetworkFailure

logger = logging.getLogger(__name__)

RenderCallback = Callable[[List[CatalogItem], DisplayRegion], Any]


class CatalogClient(Protocol):
    async def fetch_items(self, endpoint: str) -> List[CatalogItem]:
        ...


class FetchPipeline:
    """Runs fetch-then-render for one endpoint at a time.

    Every request gets a sequence number. When a request completes after a newer
    one was issued for the same key, its result is dropped instead of
    overwriting the newer rendering.
    """

    def __init__(self, client: CatalogClient, error_handler: Optional[ErrorHandler] = None):
        self.client = client
        self.error_handler = error_handler or ErrorHandler()
        self._sequence = itertools.count(1)
        self._latest: Dict[str, int] = {}

    def is_latest(self, key: str, sequence: int) -> bool:
        return self._latest.get(key) == sequence

    async def fetch_data(
        self,
        endpoint: str,
        callback: RenderCallback,
        region: DisplayRegion,
        key: Optional[str] = None,
    ) -> FetchOutcome:
        key = key or endpoint
        sequence = next(self._sequence)
        self._latest[key] = sequence
        outcome = FetchOutcome(endpoint=endpoint, sequence=sequence)

        try:
            outcome.items = await self.client.fetch_items(endpoint)
        except CatalogFetchError as e:
            outcome.error = e
        except Exception as e:
            logger.exception("Unexpected error fetching %s", endpoint)
            failure = NetworkFailure(str(e) or type(e).__name__)
            failure.__cause__ = e
            outcome.error = failure

        if not self.is_latest(key, sequence):
            logger.info("Dropping stale response for %s (request #%d)", endpoint, sequence)
            outcome.stale = True
            return outcome

        if outcome.error is not None:
            self.error_handler.display_error(outcome.error, region, context={"endpoint": endpoint})
        else:
            callback(outcome.items, region)
        return outcome
