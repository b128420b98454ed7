"""CLI commands for the Address Book."""

from __future__ import annotations

import click

from storefront.application.add_address import AddAddressHandler
from storefront.application.dto import AddressDTO, AddressSpec
from storefront.application.remove_address import RemoveAddressHandler
from storefront.application.set_default_address import SetDefaultAddressHandler
from storefront.application.show_addresses import ListAddressesHandler, ShowAddressHandler
from storefront.application.update_address import UpdateAddressHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import address_book_repository

_user_option = click.option("--user", "user_id", required=True, help="User ID.")
_id_option = click.option("--id", "address_id", required=True, help="Address ID.")

# (option name, parameter name, help) for the fields shared by add and update
_FIELDS = [
    ("--name", "full_name", "Recipient's full name."),
    ("--mobile", "mobile_number", "Mobile number."),
    ("--email", "email", "Email address."),
    ("--street", "shipping_address", "Street address."),
    ("--pin", "pin_code", "PIN / postal code."),
    ("--city", "city", "City."),
    ("--state", "state", "State."),
]


def _address_fields(required: bool):
    def decorator(func):
        for flag, param, help_text in reversed(_FIELDS):
            func = click.option(flag, param, required=required, default=None, help=help_text)(func)
        func = click.option("--landmark", default=None, help="Landmark.")(func)
        func = click.option("--country", default=None, help="Country (defaults to India).")(func)
        func = click.option("--instructions", "delivery_instructions", default=None, help="Delivery instructions.")(func)
        return func

    return decorator


def _one_line(dto: AddressDTO) -> str:
    marker = "*" if dto.is_default else " "
    return (
        f"{marker} {dto.id}  {dto.full_name}, {dto.shipping_address}, "
        f"{dto.city}, {dto.state} {dto.pin_code}, {dto.country}"
    )


@click.command("list")
@_user_option
def address_list(user_id: str) -> None:
    """List saved addresses, default first."""
    addresses = ListAddressesHandler(address_book_repo=address_book_repository()).handle(user_id)

    if not addresses:
        click.echo("No addresses saved.")
        return

    for dto in addresses:
        click.echo(_one_line(dto))


@click.command("show")
@_user_option
@_id_option
def address_show(user_id: str, address_id: str) -> None:
    """Show one address in full."""
    handler = ShowAddressHandler(address_book_repo=address_book_repository())

    try:
        dto = handler.handle(user_id, address_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Address {dto.id}{'  (default)' if dto.is_default else ''}")
    click.echo(f"  {dto.full_name}  {dto.mobile_number}  {dto.email}")
    click.echo(f"  {dto.shipping_address}")
    if dto.landmark:
        click.echo(f"  Near {dto.landmark}")
    click.echo(f"  {dto.city}, {dto.state} {dto.pin_code}, {dto.country}")
    if dto.delivery_instructions:
        click.echo(f"  Instructions: {dto.delivery_instructions}")


@click.command("add")
@_user_option
@_address_fields(required=True)
@click.option("--default", "is_default", is_flag=True, default=False, help="Make this the default address.")
def address_add(user_id: str, is_default: bool, **fields) -> None:
    """Save a new address."""
    handler = AddAddressHandler(address_book_repo=address_book_repository())

    try:
        address = handler.handle(user_id, AddressSpec(is_default=is_default, **fields))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    suffix = " (default)" if address.is_default else ""
    click.echo(f"Address {address.id} saved{suffix}.")


@click.command("update")
@_user_option
@_id_option
@_address_fields(required=False)
@click.option("--clear-landmark", is_flag=True, default=False, help="Remove the landmark.")
@click.option("--clear-instructions", is_flag=True, default=False, help="Remove the delivery instructions.")
@click.option("--default", "is_default", is_flag=True, default=False, help="Make this the default address.")
def address_update(
    user_id: str,
    address_id: str,
    is_default: bool,
    clear_landmark: bool,
    clear_instructions: bool,
    **fields,
) -> None:
    """Change fields of a saved address."""
    if clear_landmark and fields["landmark"] is not None:
        raise click.UsageError("--landmark and --clear-landmark are mutually exclusive")
    if clear_instructions and fields["delivery_instructions"] is not None:
        raise click.UsageError("--instructions and --clear-instructions are mutually exclusive")

    handler = UpdateAddressHandler(address_book_repo=address_book_repository())

    changes = {name: value for name, value in fields.items() if value is not None}
    if clear_landmark:
        changes["landmark"] = None
    if clear_instructions:
        changes["delivery_instructions"] = None
    if is_default:
        changes["is_default"] = True

    try:
        handler.handle(user_id, address_id, **changes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Address {address_id} updated.")


@click.command("remove")
@_user_option
@_id_option
def address_remove(user_id: str, address_id: str) -> None:
    """Delete a saved address."""
    handler = RemoveAddressHandler(address_book_repo=address_book_repository())

    try:
        handler.handle(user_id, address_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Address {address_id} removed.")


@click.command("default")
@_user_option
@_id_option
def address_default(user_id: str, address_id: str) -> None:
    """Make an address the default."""
    handler = SetDefaultAddressHandler(address_book_repo=address_book_repository())

    try:
        handler.handle(user_id, address_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Address {address_id} is now the default.")
