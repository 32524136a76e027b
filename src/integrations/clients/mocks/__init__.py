"""
Mock integration clients.

These clients return catalog data without calling any external API.
They are used when:
- The remote mirror is not reachable (offline development)
- We want to run the page end-to-end against fixed local files

Important:
- Mock clients must follow the SAME interface as real HTTP clients.

Switching to real:
Set ``api.source: remote`` in config/catalog_config.yml; the swap happens in
build_client (src/integrations/clients).
"""

from .local_catalogs import LocalCatalogClient

__all__ = ["LocalCatalogClient"]
