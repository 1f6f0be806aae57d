"""Application service: Add Product use case."""

from __future__ import annotations

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.catalog_store import CatalogStore


class AddProductHandler:

    def __init__(self, catalog: CatalogStore) -> None:
        self._catalog = catalog

    def handle(self, name: str, price: str, featured: bool = False) -> Product:
        """Add a new product to the catalog.

        *price* is given in major units, e.g. ``"1499.99"``.
        """
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        existing = self._catalog.get_product_by_name(name.strip())
        if existing is not None:
            raise ValidationError(f"Product '{name}' already exists")

        # Auto-assign ID based on existing products
        numeric_ids = [int(p.id) for p in self._catalog.list_products() if p.id.isdigit()]
        next_id = str(max(numeric_ids) + 1) if numeric_ids else "1"

        product = Product(
            id=next_id,
            name=name.strip(),
            price=Money.of(price),
            featured=featured,
        )
        self._catalog.save_product(product)
        return product
