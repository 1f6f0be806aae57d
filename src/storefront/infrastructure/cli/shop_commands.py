"""CLI commands for browsing the shop (homepage and shop listing)."""

from __future__ import annotations

import click

from storefront.application.dto import ProductPageDTO
from storefront.application.list_products import ListProductsHandler
from storefront.infrastructure.bootstrap import catalog_store, page_size


def _display_page(dto: ProductPageDTO) -> None:
    if not dto.items:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Price':>12}")
    click.echo("-" * 44)
    for p in dto.items:
        marker = "*" if p.featured else " "
        click.echo(f"{p.id:<6} {p.name:<24} {p.price:>12} {marker}")
    click.echo()
    click.echo(f"Page {dto.page} of {dto.last_page}  ({dto.total} products)")


@click.command("home")
def shop_home() -> None:
    """Show the featured products from the homepage."""
    handler = ListProductsHandler(catalog_store(), page_size=page_size())
    click.echo("Featured")
    _display_page(handler.home())


@click.command("list")
@click.option("--all", "show_all", is_flag=True, help="Include products that are not featured.")
@click.option("--category", default=None, help="Category slug, e.g. 'laptops'.")
@click.option("--sort", default=None, help="'low_high' or 'high_low'.")
@click.option("--page", default=1, type=int, show_default=True, help="Page number.")
def shop_list(show_all: bool, category: str | None, sort: str | None, page: int) -> None:
    """List products like the shop page does."""
    handler = ListProductsHandler(catalog_store(), page_size=page_size())
    dto = handler.handle(
        featured_only=not show_all,
        category=category,
        sort=sort,
        page=page,
    )
    click.echo("Featured" if not show_all else "All products")
    _display_page(dto)
