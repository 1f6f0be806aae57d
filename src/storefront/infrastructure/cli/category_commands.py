"""CLI commands for categories."""

from __future__ import annotations

import click

from storefront.application.add_category import AddCategoryHandler
from storefront.application.attach_category import AttachCategoryHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import catalog_store


@click.command("add")
@click.option("--name", required=True, help="Display name.")
@click.option("--slug", required=True, help="URL slug, e.g. 'laptops'.")
def category_add(name: str, slug: str) -> None:
    """Create a category."""
    handler = AddCategoryHandler(catalog=catalog_store())

    try:
        category = handler.handle(name=name, slug=slug)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category '{category.name}' added as /{category.slug}")


@click.command("list")
def category_list() -> None:
    """List categories."""
    categories = catalog_store().list_categories()

    if not categories:
        click.echo("No categories found.")
        return

    for c in categories:
        click.echo(f"{c.slug:<20} {c.name}")


@click.command("attach")
@click.option("--product", required=True, help="Product name.")
@click.option("--slug", required=True, help="Category slug.")
def category_attach(product: str, slug: str) -> None:
    """Put a product in a category."""
    handler = AttachCategoryHandler(catalog=catalog_store())

    try:
        handler.handle(product_name=product, slug=slug)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"'{product}' attached to {slug}")
