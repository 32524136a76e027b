"""
Real HTTP integration clients.

These clients talk to the real remote catalog source over HTTP:
- CSGO-API static JSON mirror (one file per category)

Important:
- Must implement the same interface as the mock clients (``fetch_items``)
- Must raise the errors defined in src/integrations/contracts/catalog.py

Switching:
The selection of mock vs real clients should happen in build_client (src/integrations/clients) only.
"""

from .catalog_api import CatalogApiClient, DEFAULT_BASE_URL, DEFAULT_LANGUAGE

__all__ = ["CatalogApiClient", "DEFAULT_BASE_URL", "DEFAULT_LANGUAGE"]
