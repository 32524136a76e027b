"""Error handling helpers for the catalog fetch pipeline."""
from typing import Any, Dict
import logging

from src.catalog.display import DisplayRegion
from src.integrations.contracts.catalog import CatalogFetchError

logger = logging.getLogger(__name__)


class ErrorHandler:
    def handle_exception(self, exc: Exception, context: Dict[str, Any] = None) -> Dict[str, Any]:
        if isinstance(exc, CatalogFetchError):
            logger.warning("Catalog fetch failed (%s): %s", type(exc).__name__, exc)
        else:
            logger.error("Unhandled exception in catalog pipeline: %s", exc, exc_info=True)
        return {
            "message": str(exc) or type(exc).__name__,
            "metadata": {"error_type": type(exc).__name__, "context": context or {}},
        }

    def display_error(self, exc: Exception, region: DisplayRegion, context: Dict[str, Any] = None) -> Dict[str, Any]:
        """Log the failure and show its message as the region's only content."""
        payload = self.handle_exception(exc, context=context)
        region.show_error(payload["message"])
        return payload
