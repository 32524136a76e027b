"""
Catalog clients.

``build_client`` is the one place that decides between the local (mock) client
and the real HTTP client.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from .mocks import LocalCatalogClient
from .real_http import CatalogApiClient

logger = logging.getLogger(__name__)


def build_client(cfg, root: Optional[Path] = None) -> Union[CatalogApiClient, LocalCatalogClient]:
    """Pick the catalog source: local files for offline work, the HTTP mirror otherwise."""
    if cfg.api.source == "local":
        local_dir = Path(cfg.api.local_dir)
        if not local_dir.is_absolute() and root is not None:
            local_dir = root / local_dir
        logger.info("Using local catalog files from %s", local_dir)
        return LocalCatalogClient(local_dir)

    logger.info("Using remote catalog API at %s (%s)", cfg.api.base_url, cfg.api.language)
    return CatalogApiClient(
        base_url=cfg.api.base_url,
        language=cfg.api.language,
        timeout_seconds=cfg.api.timeout_seconds,
    )


__all__ = ["CatalogApiClient", "LocalCatalogClient", "build_client"]
