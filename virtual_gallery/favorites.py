"""Locally persisted favorite artworks."""

from __future__ import annotations

import threading
from typing import Any, Protocol

from .logs import LogEmitter
from .models import Artwork

FAVORITES_KEY = "@favorites"


class Storage(Protocol):
    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...


class FavoritesStore(LogEmitter):
    """
    In-memory mapping of artwork id -> artwork snapshot, mirrored to storage.

    Favorites are best-effort: storage failures are logged, never raised.
    A failed write still leaves the in-memory mapping changed, so the two
    can diverge until the next successful write.
    """

    log_tag = "Favorites"

    def __init__(self, storage: Storage, key: str = FAVORITES_KEY) -> None:
        self.storage = storage
        self.key = key
        self._favorites: dict[str, Artwork] = {}
        # Serializes mutate + persist so concurrent toggles can't lose updates
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._favorites)

    def load(self) -> None:
        """Replace the in-memory mapping with the persisted one."""
        try:
            raw = self.storage.get(self.key)
        except Exception as e:
            self._log_warning(f"Failed to load favorites: {type(e).__name__}: {e}")
            self._favorites = {}
            return

        if raw is None:
            self._favorites = {}
            self._log_info("No saved favorites")
            return

        try:
            if not isinstance(raw, dict):
                raise TypeError(f"expected an object, got {type(raw).__name__}")
            self._favorites = {str(k): Artwork.from_dict(v) for k, v in raw.items()}
        except (KeyError, TypeError, ValueError) as e:
            self._log_warning(f"Saved favorites are corrupt, starting empty: {e}")
            self._favorites = {}
            return

        self._log_info(f"Loaded {len(self._favorites)} favorites")

    def toggle(self, artwork: Artwork) -> bool:
        """Add or remove an artwork. Returns True if it is now a favorite."""
        key = str(artwork.id)
        with self._lock:
            if key in self._favorites:
                del self._favorites[key]
                added = False
            else:
                self._favorites[key] = artwork
                added = True
            self._persist()

        self._log_info(f"{'Added' if added else 'Removed'} favorite {artwork.id}")
        return added

    def is_favorite(self, artwork_id: int | str) -> bool:
        return str(artwork_id) in self._favorites

    def artworks(self) -> list[Artwork]:
        """Favorite snapshots in the order they were added."""
        return list(self._favorites.values())

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {key: artwork.to_dict() for key, artwork in self._favorites.items()}

    def _persist(self) -> None:
        try:
            self.storage.set(self.key, self.to_dict())
        except Exception as e:
            self._log_error(f"Failed to save favorites: {type(e).__name__}: {e}")
