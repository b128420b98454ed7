import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import settings
from storefront.infrastructure.cli.address_commands import (
    address_add,
    address_default,
    address_list,
    address_remove,
    address_show,
    address_update,
)
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_show,
    cart_totals,
    cart_update,
)
from storefront.infrastructure.cli.checkout_commands import checkout_preview
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_update,
)
from storefront.infrastructure.cli.wishlist_commands import (
    wishlist_add,
    wishlist_check,
    wishlist_clear,
    wishlist_count,
    wishlist_move_to_cart,
    wishlist_remove,
    wishlist_show,
)
from storefront.infrastructure.logging import configure_logging


@click.group()
def cli() -> None:
    """Storefront: carts, wishlists, addresses and checkout"""
    try:
        config = settings()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    configure_logging(config.environment)


@cli.group()
def product() -> None:
    """Manage the catalog."""


@cli.group()
def cart() -> None:
    """Manage a user's cart."""


@cli.group()
def wishlist() -> None:
    """Manage a user's wishlist."""


@cli.group()
def address() -> None:
    """Manage a user's saved addresses."""


@cli.group()
def checkout() -> None:
    """Price a checkout."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_update)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_totals)
cart.add_command(cart_update)
wishlist.add_command(wishlist_add)
wishlist.add_command(wishlist_check)
wishlist.add_command(wishlist_clear)
wishlist.add_command(wishlist_count)
wishlist.add_command(wishlist_move_to_cart)
wishlist.add_command(wishlist_remove)
wishlist.add_command(wishlist_show)
address.add_command(address_add)
address.add_command(address_default)
address.add_command(address_list)
address.add_command(address_remove)
address.add_command(address_show)
address.add_command(address_update)
checkout.add_command(checkout_preview)
