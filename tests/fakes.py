"""In-memory fake catalog store for testing.

Implements the same abstract interface as the JSON store but keeps
everything in lists and dicts. No file I/O, no side effects.
"""

from __future__ import annotations

from dataclasses import replace

from storefront.domain.model.category import Category, CategoryAttachment
from storefront.domain.model.offer import Offer
from storefront.domain.model.product import Product
from storefront.domain.repository.catalog_store import CatalogStore


class FakeCatalogStore(CatalogStore):

    def __init__(
        self,
        products: list[Product] | None = None,
        categories: list[Category] | None = None,
        offers: list[Offer] | None = None,
    ) -> None:
        self._products: dict[str, Product] = {}
        self._categories: dict[str, Category] = {}
        self._attachments: list[CategoryAttachment] = []
        self._offers: list[Offer] = list(offers or [])
        for p in products or []:
            self._products[p.id] = p
        for c in categories or []:
            self._categories[c.id] = c
        self.queries: list[str] = []

    # Hand out copies so callers can't mutate the store behind its back.
    def _snapshot(self, products) -> list[Product]:
        return [replace(p) for p in products]

    def find_featured(self) -> list[Product]:
        self.queries.append("find_featured")
        return self._snapshot(p for p in self._products.values() if p.featured)

    def find_by_category_slug(self, slug: str) -> list[Product]:
        self.queries.append(f"find_by_category_slug:{slug}")
        ids = {c.id for c in self._categories.values() if c.slug == slug}
        attached = {a.product_id for a in self._attachments if a.category_id in ids}
        return self._snapshot(p for p in self._products.values() if p.id in attached)

    def list_products(self) -> list[Product]:
        self.queries.append("list_products")
        return self._snapshot(self._products.values())

    def get_tiers(self, product_id: str) -> list[Offer]:
        return [o for o in self._offers if o.product_id == product_id]

    def get_product(self, product_id: str) -> Product | None:
        product = self._products.get(product_id)
        return replace(product) if product else None

    def get_product_by_name(self, name: str) -> Product | None:
        for p in self._products.values():
            if p.name.lower() == name.lower():
                return replace(p)
        return None

    def get_category_by_slug(self, slug: str) -> Category | None:
        for c in self._categories.values():
            if c.slug == slug:
                return c
        return None

    def list_categories(self) -> list[Category]:
        return list(self._categories.values())

    def save_product(self, product: Product) -> None:
        self._products[product.id] = replace(product)

    def save_category(self, category: Category) -> None:
        self._categories[category.id] = category

    def attach(self, category_id: str, product_id: str) -> None:
        row = CategoryAttachment(category_id=category_id, product_id=product_id)
        if row not in self._attachments:
            self._attachments.append(row)

    def save_offer(self, offer: Offer) -> None:
        self._offers.append(offer)
