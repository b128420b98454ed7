"""CLI commands for the catalog."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.product import ProductStatus
from storefront.infrastructure.bootstrap import product_repository, settings

_STATUSES = click.Choice([s.value for s in ProductStatus], case_sensitive=False)


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Selling price (e.g. 1299.00).")
@click.option("--stock", default=0, type=click.IntRange(min=0), show_default=True, help="Units available.")
@click.option("--status", default="active", type=_STATUSES, show_default=True, help="Catalog status.")
@click.option("--image", default=None, help="Image URL.")
def product_add(name: str, price: str, stock: int, status: str, image: str | None) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository(), currency=settings().currency)

    try:
        product = handler.handle(name=name, price=price, stock=stock, status=status, image=image)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' added at {product.selling_price} "
        f"({product.stock_available} in stock)"
    )


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = ListProductsHandler(product_repo=product_repository()).handle()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>12} {'Stock':>6}  {'Status':<8}")
    click.echo("-" * 56)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.name:<20} {str(p.selling_price):>12} "
            f"{p.stock_available:>6}  {p.status.value:<8}"
        )


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", default=None, help="New selling price.")
@click.option("--stock", default=None, type=click.IntRange(min=0), help="New stock level.")
@click.option("--status", default=None, type=_STATUSES, help="New catalog status.")
def product_update(product_id: str, price: str | None, stock: int | None, status: str | None) -> None:
    """Update a product's price, stock or status."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(product_id=product_id, new_price=price, stock=stock, status=status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} updated: {product.selling_price}, "
        f"{product.stock_available} in stock, {product.status.value}"
    )
