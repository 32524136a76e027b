"""
Contracts (data shapes).

This folder defines what the catalog clients return and how they fail.

Both the mock and the real HTTP catalog clients use these contracts, so the
fetch pipeline never has to guess which client it is talking to.
"""

from .catalog import (
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
