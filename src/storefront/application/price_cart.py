"""Application service: Price Cart use case.

Resolves every cart line through the tiered pricing engine. This is
what the checkout page calls to decide whether to show
"Special price applied" next to a line.
"""

from __future__ import annotations

import logging

from storefront.application.dto import CartDTO, CartLineDTO, CartLineSpec
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.offer import PriceTierTable
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.catalog_store import CatalogStore
from storefront.domain.service.tiered_pricing import resolve_price

logger = logging.getLogger(__name__)


class PriceCartHandler:

    def __init__(self, catalog: CatalogStore) -> None:
        self._catalog = catalog

    def handle(self, lines: list[CartLineSpec]) -> CartDTO:
        """Price a cart.

        Steps:
        1. Resolve each product name to a Product (fail if not found).
        2. Load that product's tier table.
        3. Resolve the line price; quantities below 1 are rejected.
        """
        if not lines:
            raise ValidationError("Cart must contain at least one line")

        priced: list[CartLineDTO] = []
        total = Money.zero()

        for spec in lines:
            product = self._catalog.get_product_by_name(spec.product_name)
            if product is None:
                raise EntityNotFoundError(
                    f"Product not found: '{spec.product_name}'"
                )

            tiers = PriceTierTable(self._catalog.get_tiers(product.id))
            result = resolve_price(product, tiers, spec.quantity)
            total = total + result.total

            priced.append(
                CartLineDTO(
                    product_name=product.name,
                    quantity=result.quantity,
                    unit_price=str(result.unit_price),
                    line_total=str(result.total),
                    special_applied=result.special_applied,
                    offer=result.offer.describe() if result.special_applied else None,
                )
            )

        logger.info("Priced cart with %d lines, total %s", len(priced), total)
        return CartDTO(lines=priced, total=str(total))
