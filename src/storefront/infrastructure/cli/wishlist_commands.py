"""CLI commands for the Wishlist aggregate."""

from __future__ import annotations

import click

from storefront.application.add_to_wishlist import AddToWishlistHandler
from storefront.application.check_wishlist import CheckWishlistHandler, CountWishlistHandler
from storefront.application.clear_wishlist import ClearWishlistHandler
from storefront.application.move_to_cart import MoveToCartHandler
from storefront.application.remove_from_wishlist import RemoveFromWishlistHandler
from storefront.application.show_wishlist import ShowWishlistHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    cart_repository,
    product_repository,
    wishlist_repository,
)

_user_option = click.option("--user", "user_id", required=True, help="User ID.")
_product_option = click.option("--product", "product_id", required=True, help="Product ID.")


@click.command("show")
@_user_option
def wishlist_show(user_id: str) -> None:
    """Show a user's wishlist."""
    handler = ShowWishlistHandler(
        wishlist_repo=wishlist_repository(),
        product_repo=product_repository(),
    )

    try:
        dto = handler.handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dto.items:
        click.echo("Wishlist is empty.")
        return

    click.echo(f"  {'ID':<6} {'Product':<20} {'Price':>12} {'Stock':>6}  {'Added':<20}")
    click.echo(f"  {'-'*68}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<6} {item.product_name:<20} {item.current_price:>12} "
            f"{item.stock_available:>6}  {item.added_at:<20}"
        )
    click.echo(f"  {dto.count} item(s)")


@click.command("add")
@_user_option
@_product_option
def wishlist_add(user_id: str, product_id: str) -> None:
    """Save a product to the wishlist."""
    handler = AddToWishlistHandler(
        wishlist_repo=wishlist_repository(),
        product_repo=product_repository(),
    )

    try:
        handler.handle(user_id, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} added to wishlist.")


@click.command("remove")
@_user_option
@_product_option
def wishlist_remove(user_id: str, product_id: str) -> None:
    """Remove a product from the wishlist."""
    handler = RemoveFromWishlistHandler(wishlist_repo=wishlist_repository())

    try:
        handler.handle(user_id, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} removed from wishlist.")


@click.command("clear")
@_user_option
def wishlist_clear(user_id: str) -> None:
    """Remove every product from the wishlist."""
    handler = ClearWishlistHandler(wishlist_repo=wishlist_repository())

    try:
        handler.handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Wishlist cleared.")


@click.command("check")
@_user_option
@_product_option
def wishlist_check(user_id: str, product_id: str) -> None:
    """Tell whether a product is in the wishlist."""
    present = CheckWishlistHandler(wishlist_repo=wishlist_repository()).handle(user_id, product_id)
    click.echo("yes" if present else "no")


@click.command("count")
@_user_option
def wishlist_count(user_id: str) -> None:
    """Number of products in the wishlist."""
    click.echo(CountWishlistHandler(wishlist_repo=wishlist_repository()).handle(user_id))


@click.command("move-to-cart")
@_user_option
@_product_option
def wishlist_move_to_cart(user_id: str, product_id: str) -> None:
    """Move a wishlist product into the cart (one unit)."""
    handler = MoveToCartHandler(
        wishlist_repo=wishlist_repository(),
        cart_repo=cart_repository(),
        product_repo=product_repository(),
    )

    try:
        handler.handle(user_id, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} moved to cart.")
