"""Data models for the Virtual Art Gallery."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

UNKNOWN_ARTIST = "Unknown Artist"
UNKNOWN_DATE = "Date Unknown"

# Controller status values
IDLE = "idle"
LOADING_FIRST_PAGE = "loading_first_page"
LOADING_MORE = "loading_more"


def _optional_str(value: Any) -> str | None:
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise TypeError(f"expected string, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Artwork:
    """A catalog artwork as returned by the projection fields."""

    id: int
    title: str
    artist_display: str | None = None
    date_display: str | None = None
    image_id: str | None = None  # Opaque IIIF identifier

    @property
    def artist_label(self) -> str:
        return self.artist_display or UNKNOWN_ARTIST

    @property
    def date_label(self) -> str:
        return self.date_display or UNKNOWN_DATE

    def share_message(self) -> str:
        """Plain-text message handed to the share action."""
        return f"{self.title} by {self.artist_label}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for persistence and session state."""
        return {
            "id": self.id,
            "title": self.title,
            "artist_display": self.artist_display,
            "date_display": self.date_display,
            "image_id": self.image_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Artwork":
        """
        Parse an artwork record (API item or persisted snapshot).

        Raises KeyError, TypeError or ValueError when the record has no
        usable integer id or carries fields of the wrong type. Unknown keys
        are ignored.
        """
        if not isinstance(data, dict):
            raise TypeError(f"artwork record must be an object, got {type(data).__name__}")

        raw_id = data["id"]
        # bool is an int subclass; reject it explicitly
        if isinstance(raw_id, bool) or not isinstance(raw_id, int):
            raise ValueError(f"artwork id must be an integer, got {raw_id!r}")

        title = data.get("title")
        if title is None:
            title = "Untitled"
        elif not isinstance(title, str):
            raise TypeError(f"title must be a string, got {type(title).__name__}")

        return cls(
            id=raw_id,
            title=title,
            artist_display=_optional_str(data.get("artist_display")),
            date_display=_optional_str(data.get("date_display")),
            image_id=_optional_str(data.get("image_id")),
        )


@dataclass
class CatalogPage:
    """Result of one catalog fetch, including any error or warnings."""

    page: int
    query: str = ""
    artworks: list[Artwork] = field(default_factory=list)
    iiif_url: str | None = None
    error: str | None = None  # Generic user-facing message
    warnings: list[str] = field(default_factory=list)  # Skipped items

    @property
    def success(self) -> bool:
        """True if the request completed and the payload decoded."""
        return self.error is None


@dataclass
class GalleryState:
    """Paging, query and selection state owned by the gallery controller."""

    items: list[Artwork] = field(default_factory=list)
    current_page: int = 1
    query: str = ""
    status: str = IDLE
    selected: Artwork | None = None
    iiif_url: str | None = None
    last_error: str | None = None

    @property
    def is_loading(self) -> bool:
        return self.status != IDLE
