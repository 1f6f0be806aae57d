"""CLI commands for pricing a shopping cart."""

from __future__ import annotations

import click

from storefront.application.dto import CartLineSpec
from storefront.application.price_cart import PriceCartHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import catalog_store


def _parse_items(raw: str) -> list[CartLineSpec]:
    """Parse 'Product A:3,Product B:5' into CartLineSpec list."""
    specs: list[CartLineSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductName:Quantity'."
            )
        name, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{name}'."
            )
        specs.append(CartLineSpec(product_name=name.strip(), quantity=qty))
    return specs


@click.command("price")
@click.option("--items", required=True, help="Items as 'Product:Qty,Product:Qty'.")
def cart_price(items: str) -> None:
    """Price a cart, applying quantity offers."""
    specs = _parse_items(items)
    handler = PriceCartHandler(catalog=catalog_store())

    try:
        dto = handler.handle(specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for line in dto.lines:
        click.echo(
            f"  {line.product_name:<20} {line.quantity:>5} {line.unit_price:>10} {line.line_total:>10}"
        )
        if line.special_applied:
            click.echo(f"    Special price applied ({line.offer})")
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Cart Total':<27} {dto.total:>20}")
