"""Domain service: Tiered Pricing Engine.

Resolves what a shopper pays for a cart line. Among a product's offers
whose minimum quantity is reached, the one with the largest minimum
wins; if none is reached the base price applies.

Offer minimums are assumed unique per product. When that data
invariant is broken the candidate giving the lowest total is chosen,
with per-unit offers ahead of bundles on an exact tie, so the result
is still deterministic.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.offer import Offer, OfferPricing, PriceTierTable
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PricingResult:
    """Resolved price of one cart line.

    For base and per-unit pricing ``total == unit_price * quantity``.
    For a bundle offer ``unit_price`` is the average price per unit
    rounded to the cent; ``total`` is what gets charged. The rounded
    average can equal the base price even when the bundle is special
    (base 50, "3 for 149"), so ``special_applied`` follows ``total``.
    """

    unit_price: Money
    quantity: int
    total: Money
    special_applied: bool
    offer: Offer | None = None


def _offer_total(offer: Offer, base_price: Money, quantity: int) -> Money:
    if offer.pricing is OfferPricing.BUNDLE:
        bundles, leftover = divmod(quantity, offer.min_quantity)
        return offer.price * bundles + base_price * leftover
    return offer.price * quantity


def _average_unit_price(total: Money, quantity: int) -> Money:
    average = (Decimal(total.cents) / quantity).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return Money(int(average))


def resolve_price(
    product: Product,
    tiers: PriceTierTable | Iterable[Offer],
    quantity: int,
) -> PricingResult:
    """Resolve the price of *quantity* units of *product*.

    Raises InvalidQuantity when *quantity* is below 1 and ValidationError
    when *tiers* holds an offer for a different product.
    """
    qty = Quantity(quantity).value
    table = tiers if isinstance(tiers, PriceTierTable) else PriceTierTable(tiers)
    for tier in table:
        if tier.product_id != product.id:
            raise ValidationError(
                f"Offer for product {tier.product_id} cannot price product {product.id}"
            )
    base_total = product.price * qty

    candidates = table.qualifying(qty)
    if not candidates:
        return PricingResult(
            unit_price=product.price,
            quantity=qty,
            total=base_total,
            special_applied=False,
        )

    offer, total = min(
        ((o, _offer_total(o, product.price, qty)) for o in candidates),
        key=lambda pair: (pair[1].cents, pair[0].pricing is OfferPricing.BUNDLE),
    )
    if offer.pricing is OfferPricing.BUNDLE:
        unit_price = _average_unit_price(total, qty)
    else:
        unit_price = offer.price

    special = total != base_total
    logger.debug(
        "Product %s qty=%d: tier min=%d (%s) total=%s special=%s",
        product.id,
        qty,
        offer.min_quantity,
        offer.pricing.value,
        total,
        special,
    )
    return PricingResult(
        unit_price=unit_price,
        quantity=qty,
        total=total,
        special_applied=special,
        offer=offer,
    )
