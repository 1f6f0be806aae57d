"""JSON-file-backed implementation of CatalogStore.

The whole catalog lives in one document::

    {"products": [...], "categories": [...],
     "attachments": [...], "offers": [...]}

Every query re-reads the file, so each call works on its own snapshot.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from storefront.domain.model.category import Category, CategoryAttachment
from storefront.domain.model.offer import Offer, OfferPricing
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.catalog_store import CatalogStore

_SECTIONS = ("products", "categories", "attachments", "offers")


class JsonCatalogStore(CatalogStore):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- Listing queries ------------------------------------------------------

    def find_featured(self) -> list[Product]:
        return [p for p in self._products(self._load()) if p.featured]

    def find_by_category_slug(self, slug: str) -> list[Product]:
        raw = self._load()
        category_ids = {c.id for c in self._categories(raw) if c.slug == slug}
        if not category_ids:
            return []
        product_ids = {
            a.product_id for a in self._attachments(raw) if a.category_id in category_ids
        }
        return [p for p in self._products(raw) if p.id in product_ids]

    def list_products(self) -> list[Product]:
        return self._products(self._load())

    def get_tiers(self, product_id: str) -> list[Offer]:
        return [o for o in self._offers(self._load()) if o.product_id == product_id]

    # --- Lookups --------------------------------------------------------------

    def get_product(self, product_id: str) -> Product | None:
        for product in self.list_products():
            if product.id == product_id:
                return product
        return None

    def get_product_by_name(self, name: str) -> Product | None:
        for product in self.list_products():
            if product.name.lower() == name.lower():
                return product
        return None

    def get_category_by_slug(self, slug: str) -> Category | None:
        for category in self.list_categories():
            if category.slug == slug:
                return category
        return None

    def list_categories(self) -> list[Category]:
        return self._categories(self._load())

    # --- Catalog management ---------------------------------------------------

    def save_product(self, product: Product) -> None:
        raw = self._load()
        raw["products"] = [p for p in raw["products"] if p["id"] != product.id]
        raw["products"].append(
            {
                "id": product.id,
                "name": product.name,
                "price": product.price.cents,
                "featured": product.featured,
            }
        )
        self._persist(raw)

    def save_category(self, category: Category) -> None:
        raw = self._load()
        raw["categories"] = [c for c in raw["categories"] if c["id"] != category.id]
        raw["categories"].append(
            {"id": category.id, "name": category.name, "slug": category.slug}
        )
        self._persist(raw)

    def attach(self, category_id: str, product_id: str) -> None:
        raw = self._load()
        row = {"category_id": category_id, "product_id": product_id}
        if row not in raw["attachments"]:
            raw["attachments"].append(row)
            self._persist(raw)

    def save_offer(self, offer: Offer) -> None:
        raw = self._load()
        raw["offers"].append(
            {
                "product_id": offer.product_id,
                "min_quantity": offer.min_quantity,
                "price": offer.price.cents,
                "pricing": offer.pricing.value,
            }
        )
        self._persist(raw)

    # --- Serialization helpers ------------------------------------------------

    @staticmethod
    def _products(raw: dict[str, Any]) -> list[Product]:
        return [
            Product(
                id=item["id"],
                name=item["name"],
                price=Money(int(item["price"])),
                featured=bool(item.get("featured", False)),
            )
            for item in raw["products"]
        ]

    @staticmethod
    def _categories(raw: dict[str, Any]) -> list[Category]:
        return [
            Category(id=item["id"], name=item["name"], slug=item["slug"])
            for item in raw["categories"]
        ]

    @staticmethod
    def _attachments(raw: dict[str, Any]) -> list[CategoryAttachment]:
        return [
            CategoryAttachment(category_id=item["category_id"], product_id=item["product_id"])
            for item in raw["attachments"]
        ]

    @staticmethod
    def _offers(raw: dict[str, Any]) -> list[Offer]:
        return [
            Offer(
                product_id=item["product_id"],
                min_quantity=int(item["min_quantity"]),
                price=Money(int(item["price"])),
                pricing=OfferPricing(item.get("pricing", OfferPricing.PER_UNIT.value)),
            )
            for item in raw["offers"]
        ]

    def _load(self) -> dict[str, Any]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        for section in _SECTIONS:
            raw.setdefault(section, [])
        return raw

    def _persist(self, raw: dict[str, Any]) -> None:
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._persist({section: [] for section in _SECTIONS})
