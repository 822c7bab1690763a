"""Paging, search and selection state for the gallery screen."""

from __future__ import annotations

from typing import Callable, Protocol

from .logs import LogEmitter
from .models import (
    IDLE,
    LOADING_FIRST_PAGE,
    LOADING_MORE,
    Artwork,
    CatalogPage,
    GalleryState,
)


class PageSource(Protocol):
    def fetch_page(self, page: int, query: str = "") -> CatalogPage: ...


class GalleryController(LogEmitter):
    """
    Orchestrates catalog fetches and merges pages into the gallery state.

    search() replaces the items with page 1 of a query; load_more() appends
    the next page of the active query. Only one pagination request runs at a
    time: load_more() while loading is dropped, not queued. There is no
    end-of-data state, load_more() always asks for another page.

    Every request is tagged with a generation number. A response that
    arrives after a newer search() started is discarded.
    """

    log_tag = "Gallery"

    def __init__(self, client: PageSource) -> None:
        self.client = client
        self.state = GalleryState()
        self._generation = 0
        self._pending: int | None = None
        self._alert_callback: Callable[[str], None] | None = None

    def set_alert(self, callback: Callable[[str], None] | None) -> None:
        """Set the user-visible alert sink. Signature: callback(message)."""
        self._alert_callback = callback

    @property
    def items(self) -> list[Artwork]:
        return self.state.items

    @property
    def is_loading(self) -> bool:
        return self.state.is_loading

    def initial_load(self) -> CatalogPage | None:
        return self.search("")

    def search(self, query: str) -> CatalogPage | None:
        """Fetch page 1 of query and replace the items on success."""
        self.state.query = query
        return self._fetch(1, query, LOADING_FIRST_PAGE)

    def load_more(self) -> CatalogPage | None:
        """Fetch the next page of the active query and append it."""
        if self.state.is_loading:
            self._log_info("Load more ignored: a request is already in flight")
            return None
        return self._fetch(self.state.current_page + 1, self.state.query, LOADING_MORE)

    def select(self, artwork: Artwork) -> None:
        self.state.selected = artwork

    def close_detail(self) -> None:
        self.state.selected = None

    def _fetch(self, page: int, query: str, status: str) -> CatalogPage | None:
        self._generation += 1
        token = self._generation
        self._pending = token
        self.state.status = status

        try:
            result = self.client.fetch_page(page, query)
        finally:
            # A newer request owns the loading state once it has started
            if self._pending == token:
                self._pending = None
                self.state.status = IDLE

        if token != self._generation:
            self._log_warning(f"Discarded stale response for page {page} ({query!r})")
            return None

        if not result.success:
            self._alert(result.error or "Failed to load artworks")
            return result

        if page == 1:
            self.state.items = list(result.artworks)
        else:
            self.state.items = self.state.items + list(result.artworks)
        self.state.current_page = page
        self.state.iiif_url = result.iiif_url
        self.state.last_error = None
        self._log_info(
            f"Page {page} applied: {len(result.artworks)} new, {len(self.state.items)} total"
        )
        return result

    def _alert(self, message: str) -> None:
        self.state.last_error = message
        self._log_error(message)
        if self._alert_callback:
            self._alert_callback(message)
