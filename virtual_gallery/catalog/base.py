"""Abstract base class for catalog clients."""

from __future__ import annotations

from abc import ABC, abstractmethod

import requests

from ..logs import LogEmitter
from ..models import CatalogPage

PAGE_SIZE = 20
LOAD_FAILED = "Failed to load artworks"


class CatalogDecodeError(ValueError):
    """The response body is not the JSON shape the catalog promises."""


class CatalogClient(LogEmitter, ABC):
    """
    Abstract base class for catalog API clients.

    Subclasses implement the request and parsing logic while this base class
    turns every network or decode failure into one generic error, so callers
    never see an exception from fetch_page().
    """

    # Subclasses must define these
    name: str = "Unknown Catalog"  # Full display name
    short_name: str = "UNK"  # Short identifier (e.g., "AIC")

    # Timeouts (can be overridden)
    fetch_timeout: int = 30

    # SSL bypass for debugging
    ssl_bypass: bool = False

    @property
    def log_tag(self) -> str:
        return self.short_name

    def fetch_page(self, page: int, query: str = "") -> CatalogPage:
        """
        Fetch one page of artworks for the given query.

        An empty (or whitespace-only) query lists the catalog, anything else
        searches it. The result's error is set instead of raising.
        """
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")

        result = CatalogPage(page=page, query=query)

        try:
            self._log_info(f"Fetch started (page={page}, query={query.strip()!r})")
            self._do_fetch(page, query, result)
            self._log_info(f"Fetch complete: {len(result.artworks)} artworks on page {page}")

        except requests.Timeout:
            result.error = LOAD_FAILED
            self._log_error(f"Timeout after {self.fetch_timeout}s")

        except requests.ConnectionError:
            result.error = LOAD_FAILED
            self._log_error("Connection failed")

        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else "unknown"
            result.error = LOAD_FAILED
            self._log_error(f"HTTP error: {status}")

        except requests.RequestException as e:
            result.error = LOAD_FAILED
            self._log_error(f"Request error: {e}")

        except ValueError as e:
            # Covers CatalogDecodeError and JSON decode errors
            result.error = LOAD_FAILED
            self._log_error(f"Could not decode response: {e}")

        if result.error:
            result.artworks = []
        return result

    @abstractmethod
    def _do_fetch(self, page: int, query: str, result: CatalogPage) -> None:
        """
        Implement the actual request.

        Args:
            page: 1-based page number
            query: Raw query text as typed by the user
            result: CatalogPage to fill with artworks, warnings and iiif_url

        Note: Exceptions are caught by fetch_page().
        """
        pass
