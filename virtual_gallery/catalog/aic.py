"""Art Institute of Chicago client."""

from __future__ import annotations

import json

import requests

from .base import PAGE_SIZE, CatalogClient, CatalogDecodeError
from ..models import Artwork, CatalogPage

DEFAULT_IIIF_URL = "https://www.artic.edu/iiif/2"
IMAGE_WIDTH = 843

# Projection requested from the API
FIELDS = [
    "id",
    "title",
    "artist_display",
    "date_display",
    "image_id",
]


def build_image_url(image_id: str | None, iiif_url: str | None = None) -> str | None:
    """Return the IIIF display URL for an image id, or None when there is no image."""
    if not image_id:
        return None
    base = (iiif_url or DEFAULT_IIIF_URL).rstrip("/")
    return f"{base}/{image_id}/full/{IMAGE_WIDTH},/0/default.jpg"


class AICClient(CatalogClient):
    """Client for the Art Institute of Chicago API."""

    name = "Art Institute of Chicago"
    short_name = "AIC"
    base_url = "https://api.artic.edu/api/v1/artworks"
    search_url = "https://api.artic.edu/api/v1/artworks/search"

    def build_request(self, page: int, query: str) -> tuple[str, dict[str, str | int]]:
        """Return (url, params) for a listing or search request."""
        if not query.strip():
            return self.base_url, {
                "fields": ",".join(FIELDS),
                "page": page,
                "limit": PAGE_SIZE,
            }

        # The search endpoint takes everything in one JSON-encoded parameter
        params = json.dumps({
            "q": query,
            "fields": FIELDS,
            "page": page,
            "limit": PAGE_SIZE,
        })
        return self.search_url, {"params": params}

    def _do_fetch(self, page: int, query: str, result: CatalogPage) -> None:
        """Execute the request against the AIC API and parse the page."""
        url, params = self.build_request(page, query)

        self._log_info(
            f"Fetching {url} (timeout={self.fetch_timeout}s, ssl_bypass={self.ssl_bypass})"
        )

        response = requests.get(
            url,
            params=params,
            timeout=self.fetch_timeout,
            verify=not self.ssl_bypass,
        )
        response.raise_for_status()

        data = response.json()
        if not isinstance(data, dict):
            raise CatalogDecodeError("response is not a JSON object")

        raw_artworks = data.get("data")
        if not isinstance(raw_artworks, list):
            raise CatalogDecodeError("response has no 'data' array")

        config = data.get("config")
        if isinstance(config, dict) and isinstance(config.get("iiif_url"), str):
            result.iiif_url = config["iiif_url"]
        else:
            result.iiif_url = DEFAULT_IIIF_URL

        self._log_info(f"Received {len(raw_artworks)} artworks from API")

        for item in raw_artworks:
            try:
                result.artworks.append(Artwork.from_dict(item))
            except (KeyError, TypeError, ValueError) as e:
                item_id = item.get("id") if isinstance(item, dict) else None
                msg = f"Skipped artwork {item_id}: {e}"
                result.warnings.append(msg)
                self._log_warning(msg)
