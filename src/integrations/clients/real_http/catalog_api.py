"""
CSGO-API Catalog HTTP Client.

Fetches one category file (e.g. ``skins.json``) from the public CSGO-API mirror
and returns the parsed JSON array.

Important:
- This client is the ONLY place that talks to the remote catalog source.
- One GET per call. No retry, no caching.
"""

from __future__ import annotations

import logging
import os
from typing import Any, List, Optional

import httpx

from src.integrations.contracts.catalog import CatalogItem, NetworkFailure, ParseFailed, RequestFailed

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://bymykel.github.io/CSGO-API/api"
DEFAULT_LANGUAGE = "en"


class CatalogApiClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        language: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or os.getenv("CATALOG_API_BASE_URL", DEFAULT_BASE_URL)).rstrip("/")
        self.language = language or os.getenv("CATALOG_API_LANGUAGE", DEFAULT_LANGUAGE)
        # None disables the timeout entirely
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    def url_for(self, endpoint: str) -> str:
        return f"{self.base_url}/{self.language}/{endpoint.lstrip('/')}"

    async def fetch_items(self, endpoint: str) -> List[CatalogItem]:
        """
        GET one category file and return its JSON array.

        Raises:
            RequestFailed: non-2xx status (message is ``"Error: " + reason``)
            ParseFailed: body is not JSON, or not a JSON array
            NetworkFailure: transport-level error
        """
        url = self.url_for(endpoint)
        logger.info("Fetching catalog %s", url)
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self._transport) as client:
                response = await client.get(url)
        except httpx.RequestError as e:
            logger.error("Request error fetching %s: %s", url, e)
            raise NetworkFailure(str(e) or type(e).__name__) from e

        if not response.is_success:
            reason = response.reason_phrase or str(response.status_code)
            logger.error("HTTP error from catalog API: %s %s", response.status_code, reason)
            raise RequestFailed(response.status_code, reason)

        data = _decode_array(response)
        logger.info("Received %d items from %s", len(data), endpoint)
        return data


def _decode_array(response: httpx.Response) -> List[Any]:
    try:
        data = response.json()
    except ValueError as e:
        raise ParseFailed(str(e)) from e
    if not isinstance(data, list):
        raise ParseFailed(f"Expected a JSON array, got {type(data).__name__}")
    return data
