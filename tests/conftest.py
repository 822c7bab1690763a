"""Shared fixtures and test doubles for the gallery test-suite."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from virtual_gallery.models import Artwork, CatalogPage


def make_artwork(artwork_id: int, **overrides: Any) -> Artwork:
    fields: dict[str, Any] = {
        "id": artwork_id,
        "title": f"Artwork {artwork_id}",
        "artist_display": f"Artist {artwork_id}",
        "date_display": "1890",
        "image_id": f"img-{artwork_id}",
    }
    fields.update(overrides)
    return Artwork(**fields)


def make_page(page: int, count: int, start: int = 1, query: str = "") -> CatalogPage:
    return CatalogPage(
        page=page,
        query=query,
        artworks=[make_artwork(i) for i in range(start, start + count)],
        iiif_url="https://www.artic.edu/iiif/2",
    )


class FakeCatalogClient:
    """Returns queued pages and records every call it receives."""

    def __init__(self, *pages: CatalogPage) -> None:
        self.pages = list(pages)
        self.calls: list[tuple[int, str]] = []
        self.in_flight = 0
        self.max_in_flight = 0
        # Invoked while a request is "in flight", to simulate user intents
        self.during_fetch: Callable[[], None] | None = None

    def fetch_page(self, page: int, query: str = "") -> CatalogPage:
        self.calls.append((page, query))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            page_result = self.pages.pop(0)
            if self.during_fetch is not None:
                hook, self.during_fetch = self.during_fetch, None
                hook()
            return page_result
        finally:
            self.in_flight -= 1


class MemoryStorage:
    """In-memory stand-in for :class:`virtual_gallery.storage.KeyValueStore`."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self.data: dict[str, Any] = dict(data or {})
        self.writes = 0
        self.fail_reads = False
        self.fail_writes = False

    def get(self, key: str, default: Any = None) -> Any:
        if self.fail_reads:
            raise OSError("disk unavailable")
        return self.data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        if self.fail_writes:
            raise OSError("disk full")
        self.writes += 1
        self.data[key] = value


@pytest.fixture
def log_lines() -> list[tuple[str, str]]:
    return []


@pytest.fixture
def log_callback(log_lines: list[tuple[str, str]]) -> Callable[[str, str], None]:
    def _callback(level: str, message: str) -> None:
        log_lines.append((level, message))

    return _callback
