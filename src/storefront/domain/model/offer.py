"""Quantity-break offers and the per-product tier table.

An Offer unlocks a special price once a cart line reaches its
``min_quantity``. Whether ``price`` is charged per unit or for a whole
bundle is explicit on the offer itself (see ``OfferPricing``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class OfferPricing(Enum):
    PER_UNIT = "PER_UNIT"  # price of each unit once the tier is reached
    BUNDLE = "BUNDLE"  # total price for exactly min_quantity units


@dataclass(frozen=True)
class Offer:
    """A single price tier belonging to one product."""

    product_id: str
    min_quantity: int
    price: Money
    pricing: OfferPricing = OfferPricing.PER_UNIT

    def __post_init__(self) -> None:
        if isinstance(self.min_quantity, bool) or not isinstance(self.min_quantity, int):
            raise ValidationError(
                f"Offer minimum quantity must be an integer, "
                f"got {type(self.min_quantity).__name__}"
            )
        if self.min_quantity < 1:
            raise ValidationError("Offer minimum quantity must be positive")

    @property
    def is_bundle(self) -> bool:
        return self.pricing is OfferPricing.BUNDLE

    def describe(self) -> str:
        if self.is_bundle:
            return f"{self.min_quantity} for {self.price}"
        return f"{self.price} each from {self.min_quantity}"


class PriceTierTable:
    """Ordered, read-only set of a product's offers.

    Minimum quantities are expected to be unique per product. Duplicates
    are an upstream data error; the table keeps them (ordered by price)
    and logs a warning rather than dropping any.
    """

    def __init__(self, offers: Iterable[Offer] = ()) -> None:
        self._offers: tuple[Offer, ...] = tuple(
            sorted(offers, key=lambda o: (o.min_quantity, o.price.cents, o.pricing.value))
        )
        minimums = [o.min_quantity for o in self._offers]
        duplicates = sorted({m for m in minimums if minimums.count(m) > 1})
        if duplicates:
            logger.warning(
                "Duplicate tier minimum quantities %s for product %s",
                duplicates,
                self._offers[0].product_id,
            )

    def __iter__(self):
        return iter(self._offers)

    def __bool__(self) -> bool:
        return bool(self._offers)

    def qualifying(self, quantity: int) -> list[Offer]:
        """Offers with the largest ``min_quantity`` not above *quantity*.

        Empty when *quantity* is below every tier. More than one offer
        only when the table holds duplicate minimums.
        """
        eligible = [o for o in self._offers if o.min_quantity <= quantity]
        if not eligible:
            return []
        best_minimum = eligible[-1].min_quantity
        return [o for o in eligible if o.min_quantity == best_minimum]
