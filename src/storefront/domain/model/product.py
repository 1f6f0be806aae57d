"""Product aggregate.

Products are created by catalog management and are read-only to the
listing and pricing engines.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    ``featured`` products are the only ones visible on the homepage and
    in the default shop listing.
    """

    id: str
    name: str
    price: Money
    featured: bool = False

    def update_price(self, new_price: Money) -> None:
        """Change the base price.

        Offers are stored separately and are not rescaled.
        """
        self.price = new_price

    def mark_featured(self, featured: bool = True) -> None:
        self.featured = featured


def identifier_key(product_id: str) -> tuple[int, int, str]:
    """Sort key for product identifiers.

    Numeric identifiers compare numerically (catalog insertion order),
    anything else sorts after them lexicographically.
    """
    if product_id.isdigit():
        return (0, int(product_id), "")
    return (1, 0, product_id)
