"""Application service: Attach Category use case.

Links a product to a category. Attaching the same pair twice is a
no-op; a product may sit in any number of categories.
"""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.catalog_store import CatalogStore


class AttachCategoryHandler:

    def __init__(self, catalog: CatalogStore) -> None:
        self._catalog = catalog

    def handle(self, product_name: str, slug: str) -> None:
        product = self._catalog.get_product_by_name(product_name)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{product_name}'")

        category = self._catalog.get_category_by_slug(slug)
        if category is None:
            raise EntityNotFoundError(f"Category not found: '{slug}'")

        self._catalog.attach(category.id, product.id)
