"""CLI commands for checkout."""

from __future__ import annotations

import click

from storefront.application.preview_checkout import PreviewCheckoutHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.checkout import PaymentMethod
from storefront.infrastructure.bootstrap import (
    address_book_repository,
    cart_repository,
    delivery_policy,
    product_repository,
)


@click.command("preview")
@click.option("--user", "user_id", required=True, help="User ID.")
@click.option("--items", required=True, help="Cart line IDs, comma separated.")
@click.option("--address", "address_id", required=True, help="Address ID.")
@click.option(
    "--payment",
    "payment_method",
    required=True,
    type=click.Choice([m.value for m in PaymentMethod], case_sensitive=False),
    help="Payment method.",
)
def checkout_preview(user_id: str, items: str, address_id: str, payment_method: str) -> None:
    """Price the selected cart lines for delivery to an address."""
    line_ids = [part.strip() for part in items.split(",") if part.strip()]

    try:
        handler = PreviewCheckoutHandler(
            cart_repo=cart_repository(),
            address_book_repo=address_book_repository(),
            product_repo=product_repository(),
            delivery_policy=delivery_policy(),
        )
        dto = handler.handle(user_id, line_ids, address_id, payment_method)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Deliver to: {dto.address.full_name}, {dto.address.city} {dto.address.pin_code}")
    click.echo(f"Payment:    {dto.payment_method}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Colour':<8} {'Qty':>4} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*60}")
    for line in dto.lines:
        click.echo(
            f"  {line.product_name:<20} {line.selected_color or '-':<8} {line.quantity:>4} "
            f"{line.unit_price:>12} {line.line_total:>12}"
        )
    click.echo(f"  {'-'*60}")
    click.echo(f"  {'Subtotal':<47} {dto.subtotal:>12}")
    click.echo(f"  {'Delivery':<47} {dto.delivery_fee:>12}")
    click.echo(f"  {'Total':<47} {dto.total:>12}")
