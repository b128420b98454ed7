"""CLI commands for the Cart aggregate."""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.clear_cart import ClearCartHandler
from storefront.application.dto import CartDTO
from storefront.application.get_cart_totals import GetCartTotalsHandler
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.update_cart_item import UpdateCartItemHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import cart_repository, product_repository, settings

_user_option = click.option("--user", "user_id", required=True, help="User ID.")
_color_option = click.option("--color", "selected_color", default=None, help="Selected colour variant.")


def _display_cart(dto: CartDTO) -> None:
    """Shared formatting for displaying a cart."""
    if not dto.lines:
        click.echo("Cart is empty.")
    else:
        click.echo(
            f"  {'Line':<32} {'Product':<20} {'Colour':<8} {'Qty':>4} "
            f"{'Price':>12} {'Total':>12}"
        )
        click.echo(f"  {'-'*93}")
        for line in dto.lines:
            click.echo(
                f"  {line.line_id:<32} {line.product_name:<20} {line.selected_color or '-':<8} "
                f"{line.quantity:>4} {line.price_at_add:>12} {line.line_total:>12}"
            )
            if line.price_changed:
                click.echo(f"  {'':<32} now {line.current_price} in the catalog")
        click.echo(f"  {'-'*93}")
        click.echo(f"  {'Items':<32} {dto.total_quantity:>35} {'Total':>12} {dto.total_value:>12}")

    if dto.hidden_line_count:
        click.echo(f"{dto.hidden_line_count} item(s) hidden: product no longer available.")


@click.command("show")
@_user_option
def cart_show(user_id: str) -> None:
    """Show a user's cart."""
    handler = ShowCartHandler(
        cart_repo=cart_repository(),
        product_repo=product_repository(),
        currency=settings().currency,
    )

    try:
        dto = handler.handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("add")
@_user_option
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--qty", "quantity", default=1, type=int, show_default=True, help="Units to add.")
@_color_option
def cart_add(user_id: str, product_id: str, quantity: int, selected_color: str | None) -> None:
    """Add a product to the cart (merges with an existing line)."""
    handler = AddToCartHandler(cart_repo=cart_repository(), product_repo=product_repository())

    try:
        cart = handler.handle(user_id, product_id, quantity=quantity, selected_color=selected_color)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    line = cart.find_line(product_id, selected_color)
    click.echo(f"Added {quantity} x product #{product_id}; line now holds {line.quantity}.")


@click.command("update")
@_user_option
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--qty", "quantity", required=True, type=int, help="New quantity.")
@_color_option
def cart_update(user_id: str, product_id: str, quantity: int, selected_color: str | None) -> None:
    """Set the quantity of a cart line."""
    handler = UpdateCartItemHandler(cart_repo=cart_repository(), product_repo=product_repository())

    try:
        handler.handle(user_id, product_id, quantity, selected_color=selected_color)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} quantity set to {quantity}.")


@click.command("remove")
@_user_option
@click.option("--product", "product_id", required=True, help="Product ID.")
@_color_option
def cart_remove(user_id: str, product_id: str, selected_color: str | None) -> None:
    """Remove a line from the cart."""
    handler = RemoveFromCartHandler(cart_repo=cart_repository())

    try:
        handler.handle(user_id, product_id, selected_color=selected_color)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} removed from cart.")


@click.command("clear")
@_user_option
def cart_clear(user_id: str) -> None:
    """Remove every line from the cart."""
    handler = ClearCartHandler(cart_repo=cart_repository())

    try:
        handler.handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Cart cleared.")


@click.command("totals")
@_user_option
def cart_totals(user_id: str) -> None:
    """Show item count and value of the cart."""
    dto = GetCartTotalsHandler(cart_repo=cart_repository(), currency=settings().currency).handle(user_id)
    click.echo(f"Items: {dto.total_quantity}")
    click.echo(f"Total: {dto.total_value}")
