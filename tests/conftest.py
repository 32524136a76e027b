"""Pytest fixtures for catalog fetch and render tests."""

import json
from typing import Any, Callable, Dict, List

import httpx
import pytest
from bs4 import BeautifulSoup

from src.catalog.display import DisplayRegion
from src.integrations.clients.real_http import CatalogApiClient

BASE_URL = "https://catalog.test/api"

AK47 = {
    "name": "AK-47",
    "category": {"name": "Rifle"},
    "rarity": {"name": "Classified", "color": "#d32ce6"},
    "image": "ak47.png",
}


class RecordingClient:
    """Catalog client stub that records every endpoint it is asked for."""

    def __init__(self, payloads: Dict[str, List[Dict[str, Any]]] = None, error: Exception = None):
        self.payloads = payloads or {}
        self.error = error
        self.calls: List[str] = []

    async def fetch_items(self, endpoint: str) -> List[Dict[str, Any]]:
        self.calls.append(endpoint)
        if self.error is not None:
            raise self.error
        return self.payloads.get(endpoint, [])


@pytest.fixture
def region():
    return DisplayRegion()


@pytest.fixture
def soup_of():
    def _soup(region: DisplayRegion) -> BeautifulSoup:
        return BeautifulSoup(region.to_html(), "html.parser").find(id=region.element_id)
    return _soup


@pytest.fixture
def make_api_client():
    """Build a CatalogApiClient whose HTTP traffic goes to ``handler``."""
    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> CatalogApiClient:
        return CatalogApiClient(base_url=BASE_URL, language="en", transport=httpx.MockTransport(handler))
    return _make


def json_response(data: Any, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(data).encode("utf-8"), headers={"Content-Type": "application/json"})
