"""Catalog API clients."""

from .aic import AICClient, build_image_url  # noqa: F401
from .base import LOAD_FAILED, PAGE_SIZE, CatalogClient  # noqa: F401
