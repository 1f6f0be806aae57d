"""Application service: Add Category use case."""

from __future__ import annotations

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.category import Category
from storefront.domain.repository.catalog_store import CatalogStore


class AddCategoryHandler:

    def __init__(self, catalog: CatalogStore) -> None:
        self._catalog = catalog

    def handle(self, name: str, slug: str) -> Category:
        if self._catalog.get_category_by_slug(slug) is not None:
            raise ValidationError(f"Category slug '{slug}' already exists")

        numeric_ids = [int(c.id) for c in self._catalog.list_categories() if c.id.isdigit()]
        next_id = str(max(numeric_ids) + 1) if numeric_ids else "1"

        category = Category(id=next_id, name=name.strip(), slug=slug)
        self._catalog.save_category(category)
        return category
