"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import catalog_store


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 1499.99).")
@click.option("--featured/--not-featured", default=False, help="Show on the homepage.")
def product_add(name: str, price: str, featured: bool) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(catalog=catalog_store())

    try:
        product = handler.handle(name=name, price=price, featured=featured)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = catalog_store().list_products()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>12} {'Featured':>9}")
    click.echo("-" * 50)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {str(p.price):>12} {'yes' if p.featured else 'no':>9}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--featured/--not-featured", default=None, help="Change homepage visibility.")
def product_update(product_id: str, price: str | None, featured: bool | None) -> None:
    """Update a product's price or featured flag."""
    handler = UpdateProductHandler(catalog=catalog_store())

    try:
        product = handler.handle(product_id=product_id, new_price=price, featured=featured)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} now {product.price}"
        f"{' (featured)' if product.featured else ''}"
    )
