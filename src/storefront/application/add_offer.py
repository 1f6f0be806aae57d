"""Application service: Add Offer use case.

Keeps the tier data clean at entry: one offer per minimum quantity
per product.
"""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.offer import Offer, OfferPricing
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.catalog_store import CatalogStore


class AddOfferHandler:

    def __init__(self, catalog: CatalogStore) -> None:
        self._catalog = catalog

    def handle(
        self,
        product_name: str,
        min_quantity: int,
        price: str,
        bundle: bool = False,
    ) -> Offer:
        """Add a quantity tier to a product.

        With *bundle* the price covers ``min_quantity`` units together,
        otherwise it is charged per unit.
        """
        product = self._catalog.get_product_by_name(product_name)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{product_name}'")

        offer = Offer(
            product_id=product.id,
            min_quantity=min_quantity,
            price=Money.of(price),
            pricing=OfferPricing.BUNDLE if bundle else OfferPricing.PER_UNIT,
        )

        for existing in self._catalog.get_tiers(product.id):
            if existing.min_quantity == offer.min_quantity:
                raise ValidationError(
                    f"{product.name} already has an offer from {min_quantity} units"
                )

        self._catalog.save_offer(offer)
        return offer
