"""
Local Catalog Client (Mock/Local).

Purpose:
- Acts as a development-time catalog source when the remote mirror is not reachable.
- Serves category files (``skins.json``, ``stickers.json``, ...) from a local directory.

Swap:
Replace with clients/real_http/catalog_api.py by setting ``api.source: remote``
(or ``CATALOG_SOURCE=remote``).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Union

from src.integrations.contracts.catalog import CatalogItem, ParseFailed, RequestFailed

logger = logging.getLogger(__name__)


class LocalCatalogClient:
    def __init__(self, data_dir: Union[str, Path]):
        self.data_dir = Path(data_dir)

    async def fetch_items(self, endpoint: str) -> List[CatalogItem]:
        path = self.data_dir / endpoint.lstrip("/")
        if not path.is_file():
            logger.warning("Local catalog file not found: %s", path)
            raise RequestFailed(404, "Not Found")

        try:
            data = json.loads(path.read_bytes())
        except ValueError as e:
            raise ParseFailed(str(e)) from e
        if not isinstance(data, list):
            raise ParseFailed(f"Expected a JSON array, got {type(data).__name__}")

        logger.debug("Loaded %d items from %s", len(data), path)
        return data
