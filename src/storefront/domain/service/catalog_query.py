"""Domain service: Catalog Query Engine.

Builds the product listing shown on the homepage and the shop page:
featured-only filtering, category restriction, price sorting and
pagination. Each call issues a single catalog store query and works on
the snapshot it returns, so concurrent listings never interfere.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from storefront.domain.model.product import Product, identifier_key
from storefront.domain.repository.catalog_store import CatalogStore

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 9


class SortOrder(Enum):
    NONE = "none"
    LOW_HIGH = "low_high"
    HIGH_LOW = "high_low"

    @classmethod
    def parse(cls, raw: str | None) -> SortOrder:
        """Map a raw ``sort`` parameter to a SortOrder.

        Missing or unrecognised values fall back to the default order.
        """
        if not raw:
            return cls.NONE
        try:
            return cls(raw.strip().lower())
        except ValueError:
            logger.debug("Unknown sort %r, using default order", raw)
            return cls.NONE


@dataclass(frozen=True)
class ListingQuery:
    """Filter, sort and page parameters for a product listing."""

    featured_only: bool = True
    category: str | None = None
    sort: SortOrder = SortOrder.NONE
    page: int = 1


@dataclass(frozen=True)
class ProductPage:
    """One page of a listing plus the size of the whole listing."""

    items: list[Product]
    total: int
    page: int
    page_size: int

    @property
    def last_page(self) -> int:
        return max(1, -(-self.total // self.page_size))

    @property
    def has_more(self) -> bool:
        return self.page < self.last_page

    @property
    def is_empty(self) -> bool:
        return not self.items


def sort_products(products: Iterable[Product], order: SortOrder) -> list[Product]:
    """Return *products* in listing order.

    Ties on price (and the default order) break by identifier so the
    same snapshot always yields the same sequence.
    """
    by_id = sorted(products, key=lambda p: identifier_key(p.id))
    if order is SortOrder.LOW_HIGH:
        return sorted(by_id, key=lambda p: p.price.cents)
    if order is SortOrder.HIGH_LOW:
        return sorted(by_id, key=lambda p: -p.price.cents)
    return by_id


def paginate(products: list[Product], page: int, page_size: int) -> list[Product]:
    """Slice out page *page* (1-based). Pages past the end are empty."""
    start = (page - 1) * page_size
    return products[start:start + page_size]


class CatalogQueryEngine:

    def __init__(self, catalog: CatalogStore, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self._catalog = catalog
        self._page_size = page_size

    @property
    def page_size(self) -> int:
        return self._page_size

    def list_products(self, query: ListingQuery) -> ProductPage:
        """Run *query* against the catalog and return the requested page."""
        snapshot = self._fetch(query)
        if query.featured_only:
            snapshot = [p for p in snapshot if p.featured]

        ordered = sort_products(snapshot, query.sort)
        page = max(query.page, 1)
        items = paginate(ordered, page, self._page_size)

        logger.debug(
            "Listing featured_only=%s category=%r sort=%s page=%d: %d of %d products",
            query.featured_only,
            query.category,
            query.sort.value,
            page,
            len(items),
            len(ordered),
        )
        return ProductPage(
            items=items, total=len(ordered), page=page, page_size=self._page_size
        )

    def _fetch(self, query: ListingQuery) -> list[Product]:
        if query.category is not None:
            return self._catalog.find_by_category_slug(query.category)
        if query.featured_only:
            return self._catalog.find_featured()
        return self._catalog.list_products()
