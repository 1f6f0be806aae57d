from __future__ import annotations

import logging

import click

from storefront.config import get_settings
from storefront.infrastructure.cli.cart_commands import cart_price
from storefront.infrastructure.cli.category_commands import (
    category_add,
    category_attach,
    category_list,
)
from storefront.infrastructure.cli.offer_commands import offer_add, offer_list
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_update,
)
from storefront.infrastructure.cli.shop_commands import shop_home, shop_list


@click.group()
@click.option("--log-level", default=None, help="Override STOREFRONT_LOG_LEVEL (e.g. DEBUG).")
def cli(log_level: str | None) -> None:
    """Storefront — catalog listing and cart pricing"""
    level = (log_level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def shop() -> None:
    """Browse the shop."""


@cli.group()
def cart() -> None:
    """Price a cart."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def category() -> None:
    """Manage categories."""


@cli.group()
def offer() -> None:
    """Manage quantity offers."""


# Register subcommands
shop.add_command(shop_home)
shop.add_command(shop_list)
cart.add_command(cart_price)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_update)
category.add_command(category_add)
category.add_command(category_attach)
category.add_command(category_list)
offer.add_command(offer_add)
offer.add_command(offer_list)
