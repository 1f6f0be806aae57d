"""Application service: Show Offers use case (query)."""

from __future__ import annotations

from storefront.application.dto import OfferDTO
from storefront.domain.model.offer import PriceTierTable
from storefront.domain.repository.catalog_store import CatalogStore


class ShowOffersHandler:

    def __init__(self, catalog: CatalogStore) -> None:
        self._catalog = catalog

    def handle(self) -> list[OfferDTO]:
        lines: list[OfferDTO] = []
        for product in self._catalog.list_products():
            for offer in PriceTierTable(self._catalog.get_tiers(product.id)):
                lines.append(
                    OfferDTO(
                        product_name=product.name,
                        min_quantity=offer.min_quantity,
                        price=str(offer.price),
                        pricing=offer.pricing.value,
                    )
                )
        return lines
