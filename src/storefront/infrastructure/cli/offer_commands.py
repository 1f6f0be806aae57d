"""CLI commands for quantity offers."""

from __future__ import annotations

import click

from storefront.application.add_offer import AddOfferHandler
from storefront.application.show_offers import ShowOffersHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import catalog_store


@click.command("add")
@click.option("--product", required=True, help="Product name.")
@click.option("--min-qty", "min_quantity", required=True, type=int, help="Quantity that unlocks the offer.")
@click.option("--price", required=True, help="Offer price (e.g. 1.30).")
@click.option("--bundle", is_flag=True, help="Price covers min-qty units together instead of each unit.")
def offer_add(product: str, min_quantity: int, price: str, bundle: bool) -> None:
    """Add a quantity offer to a product."""
    handler = AddOfferHandler(catalog=catalog_store())

    try:
        offer = handler.handle(
            product_name=product, min_quantity=min_quantity, price=price, bundle=bundle
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Offer for '{product}': {offer.describe()}")


@click.command("list")
def offer_list() -> None:
    """Show every quantity offer."""
    lines = ShowOffersHandler(catalog=catalog_store()).handle()

    if not lines:
        click.echo("No offers found.")
        return

    click.echo(f"{'Product':<20} {'Min Qty':>8} {'Price':>10} {'Pricing':>10}")
    click.echo("-" * 51)
    for line in lines:
        click.echo(
            f"{line.product_name:<20} {line.min_quantity:>8} {line.price:>10} {line.pricing:>10}"
        )
