"""
Integrations layer.
This package contains all code used to communicate with external systems:
- CSGO-API static JSON mirror (item catalogs per category)

Key rule:
- Catalog rendering MUST NOT call external APIs directly.
- The fetch pipeline calls integration clients (under src/integrations/clients).
- We use the LOCAL client for offline development and the REAL_HTTP client otherwise.

Switching implementations:
- The selection of mock vs real clients happens in ONE place (build_client in src/integrations/clients).
"""

from .contracts.catalog import (
    CatalogFetchError,
    CatalogItem,
    FetchOutcome,
    NetworkFailure,
    ParseFailed,
    RequestFailed,
    UnknownTrigger,
)

__all__ = [
    "CatalogFetchError", "CatalogItem", "FetchOutcome",
    "NetworkFailure", "ParseFailed", "RequestFailed", "UnknownTrigger",
]
