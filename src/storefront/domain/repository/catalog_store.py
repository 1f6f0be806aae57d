"""Abstract catalog store for products, categories and offers.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer. Every query returns a fresh
snapshot; callers never share mutable catalog state.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.category import Category
from storefront.domain.model.offer import Offer
from storefront.domain.model.product import Product


class CatalogStore(ABC):

    # --- Listing queries ------------------------------------------------------

    @abstractmethod
    def find_featured(self) -> list[Product]:
        """Return every product flagged as featured."""

    @abstractmethod
    def find_by_category_slug(self, slug: str) -> list[Product]:
        """Return products attached to the category with this exact slug.

        An unknown slug yields an empty list.
        """

    @abstractmethod
    def list_products(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def get_tiers(self, product_id: str) -> list[Offer]:
        """Return the offers defined for a product (possibly none)."""

    # --- Lookups --------------------------------------------------------------

    @abstractmethod
    def get_product(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_product_by_name(self, name: str) -> Product | None:
        """Return a product by name (case-insensitive), or None."""

    @abstractmethod
    def get_category_by_slug(self, slug: str) -> Category | None:
        """Return a category by its exact slug, or None."""

    @abstractmethod
    def list_categories(self) -> list[Category]:
        """Return every category."""

    # --- Catalog management ---------------------------------------------------

    @abstractmethod
    def save_product(self, product: Product) -> None:
        """Persist a new or updated product."""

    @abstractmethod
    def save_category(self, category: Category) -> None:
        """Persist a new or updated category."""

    @abstractmethod
    def attach(self, category_id: str, product_id: str) -> None:
        """Attach a product to a category. Attaching twice is a no-op."""

    @abstractmethod
    def save_offer(self, offer: Offer) -> None:
        """Persist an offer for its product."""
