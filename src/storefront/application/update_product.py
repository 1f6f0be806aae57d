"""Application service: Update Product use case."""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.catalog_store import CatalogStore


class UpdateProductHandler:

    def __init__(self, catalog: CatalogStore) -> None:
        self._catalog = catalog

    def handle(
        self,
        product_id: str,
        new_price: str | None = None,
        featured: bool | None = None,
    ) -> Product:
        """Change a product's base price and/or featured flag."""
        if new_price is None and featured is None:
            raise ValidationError("Nothing to update")

        product = self._catalog.get_product(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if new_price is not None:
            product.update_price(Money.of(new_price))
        if featured is not None:
            product.mark_featured(featured)
        self._catalog.save_product(product)
        return product
