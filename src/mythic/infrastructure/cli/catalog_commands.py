"""CLI commands for products and categories."""

from __future__ import annotations

import click

from mythic.application.add_product import AddProductHandler
from mythic.application.categories import AddCategoryHandler
from mythic.application.remove_product import RemoveProductHandler
from mythic.application.show_product import SearchProductsHandler
from mythic.domain.exceptions import DomainException
from mythic.infrastructure.bootstrap import unit_of_work


@click.command("add")
@click.option("--id", "product_id", default=None, help="Explicit product ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--description", required=True, help="Product description.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--category", "categories", multiple=True, help="Category ID (repeatable).")
def product_add(
    product_id: str | None, name: str, description: str, price: str, categories: tuple[str, ...]
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(unit_of_work())

    try:
        dto = handler.handle(
            name=name,
            description=description,
            price=price,
            category_ids=list(categories),
            product_id=product_id,
        )
    except DomainException as exc:
        raise click.ClickException(exc.message)

    click.echo(f"Product {dto.id} '{dto.name}' added at ${dto.price:.2f}")


@click.command("list")
@click.option("--name", default=None, help="Filter by name (partial).")
def product_list(name: str | None) -> None:
    """List products in the catalog."""
    products = SearchProductsHandler(unit_of_work()).handle(name=name)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<34} {'Name':<24} {'Price':>10}")
    click.echo("-" * 70)
    for p in products:
        click.echo(f"{p.id:<34} {p.name:<24} {'$' + format(p.price, '.2f'):>10}")


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_remove(product_id: str) -> None:
    """Remove a product that no order references."""
    try:
        dto = RemoveProductHandler(unit_of_work()).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(exc.message)

    click.echo(f"Product {dto.id} '{dto.name}' removed")


@click.command("add")
@click.option("--id", "category_id", default=None, help="Explicit category ID.")
@click.option("--name", required=True, help="Category name.")
def category_add(category_id: str | None, name: str) -> None:
    """Add a product category."""
    try:
        dto = AddCategoryHandler(unit_of_work()).handle(name, category_id=category_id)
    except DomainException as exc:
        raise click.ClickException(exc.message)

    click.echo(f"Category {dto.id} '{dto.name}' added")
