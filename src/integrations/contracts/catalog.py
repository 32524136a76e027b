"""
Catalog contracts: item shape, fetch outcome and the fetch error taxonomy.

Catalog items are NOT modelled: the remote API's JSON records are passed through
as plain dicts and only read by the card renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

CatalogItem = Dict[str, Any]


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class CatalogFetchError(Exception):
    """Base class for every failure of one catalog fetch."""

    @property
    def message(self) -> str:
        return str(self)


class RequestFailed(CatalogFetchError):
    """The remote answered with a non-success HTTP status."""

    def __init__(self, status_code: int, reason: str):
        super().__init__(f"Error: {reason}")
        self.status_code = status_code
        self.reason = reason


class ParseFailed(CatalogFetchError):
    """The response body was not valid JSON."""


class NetworkFailure(CatalogFetchError):
    """Transport-level failure (DNS, connection refused, TLS, ...)."""


class UnknownTrigger(KeyError):
    """No action binding exists for the given trigger id."""

    def __init__(self, trigger_id: str):
        super().__init__(trigger_id)
        self.trigger_id = trigger_id


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass
class FetchOutcome:
    """What one pipeline run produced."""
    endpoint: str
    sequence: int
    items: List[CatalogItem] = field(default_factory=list)
    error: Optional[CatalogFetchError] = None
    stale: bool = False                  # superseded by a newer request for the same key

    @property
    def ok(self) -> bool:
        return self.error is None
