"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as shown in a listing."""

    id: str
    name: str
    price: str  # formatted, e.g. "$1499.99"
    price_cents: int
    featured: bool


@dataclass(frozen=True)
class ProductPageDTO:
    """Output: one page of the shop listing."""

    items: list[ProductDTO]
    total: int
    page: int
    page_size: int
    last_page: int


@dataclass(frozen=True)
class CartLineSpec:
    """Input: what the shopper put in the cart (product name + quantity)."""

    product_name: str
    quantity: int


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a priced cart line as displayed to the shopper."""

    product_name: str
    quantity: int
    unit_price: str
    line_total: str
    special_applied: bool
    offer: str | None = None


@dataclass(frozen=True)
class CartDTO:
    """Output: a fully priced cart."""

    lines: list[CartLineDTO]
    total: str

    @property
    def any_special_applied(self) -> bool:
        return any(line.special_applied for line in self.lines)


@dataclass(frozen=True)
class OfferDTO:
    product_name: str
    min_quantity: int
    price: str
    pricing: str
