"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.config import get_settings
from storefront.infrastructure.persistence.json_catalog_store import JsonCatalogStore


def catalog_store() -> JsonCatalogStore:
    return JsonCatalogStore(get_settings().catalog_file)


def page_size() -> int:
    return get_settings().page_size
