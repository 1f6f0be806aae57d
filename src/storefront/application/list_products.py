"""Application service: List Products use case (query).

Backs both the homepage (featured products, first page) and the shop
page (optional category, sort and page parameters).
"""

from __future__ import annotations

from storefront.application.dto import ProductDTO, ProductPageDTO
from storefront.domain.model.product import Product
from storefront.domain.repository.catalog_store import CatalogStore
from storefront.domain.service.catalog_query import (
    DEFAULT_PAGE_SIZE,
    CatalogQueryEngine,
    ListingQuery,
    SortOrder,
)


class ListProductsHandler:

    def __init__(self, catalog: CatalogStore, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        self._engine = CatalogQueryEngine(catalog, page_size=page_size)

    def handle(
        self,
        featured_only: bool = True,
        category: str | None = None,
        sort: str | None = None,
        page: int = 1,
    ) -> ProductPageDTO:
        """List products the way ``/shop?category=..&sort=..&page=..`` would."""
        query = ListingQuery(
            featured_only=featured_only,
            category=category,
            sort=SortOrder.parse(sort),
            page=page,
        )
        result = self._engine.list_products(query)
        return ProductPageDTO(
            items=[to_product_dto(p) for p in result.items],
            total=result.total,
            page=result.page,
            page_size=result.page_size,
            last_page=result.last_page,
        )

    def home(self) -> ProductPageDTO:
        """Featured products for the homepage."""
        return self.handle(featured_only=True)


def to_product_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        price=str(product.price),
        price_cents=product.price.cents,
        featured=product.featured,
    )
