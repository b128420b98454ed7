"""AddressBook aggregate: a user's saved delivery addresses.

All of a user's addresses live in one document so that moving the
default flag ("clear all, then set one") is a single write. The book
enforces that exactly one address is the default whenever it holds any.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.exceptions import EntityNotFoundError, ValidationError

DEFAULT_COUNTRY = "India"

REQUIRED_FIELDS = (
    "full_name",
    "mobile_number",
    "email",
    "shipping_address",
    "pin_code",
    "city",
    "state",
)

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET = object()


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _new_address_id() -> str:
    return uuid.uuid4().hex


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


@dataclass
class Address:
    """A delivery address owned by exactly one user."""

    full_name: str
    mobile_number: str
    email: str
    shipping_address: str
    pin_code: str
    city: str
    state: str
    landmark: str | None = None
    country: str = DEFAULT_COUNTRY
    delivery_instructions: str | None = None
    is_default: bool = False
    id: str = field(default_factory=_new_address_id)
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)


@dataclass
class AddressBook:
    """Aggregate root holding every address of one user.

    Invariant: when ``addresses`` is non-empty, exactly one of them has
    ``is_default`` set. Insertion order doubles as creation order.
    """

    owner_id: str
    addresses: list[Address] = field(default_factory=list)
    version: int = 0

    # --- Commands -------------------------------------------------------------

    def add_address(
        self,
        full_name: str,
        mobile_number: str,
        email: str,
        shipping_address: str,
        pin_code: str,
        city: str,
        state: str,
        landmark: str | None = None,
        country: str | None = None,
        delivery_instructions: str | None = None,
        is_default: bool = False,
    ) -> Address:
        values = {
            "full_name": full_name,
            "mobile_number": mobile_number,
            "email": email,
            "shipping_address": shipping_address,
            "pin_code": pin_code,
            "city": city,
            "state": state,
        }
        missing = [name for name, value in values.items() if not (value and value.strip())]
        if missing:
            raise ValidationError(
                f"Please provide all required fields (missing: {', '.join(missing)})"
            )

        # First address is always default
        should_be_default = not self.addresses or bool(is_default)

        address = Address(
            full_name=full_name.strip(),
            mobile_number=mobile_number.strip(),
            email=email.strip().lower(),
            shipping_address=shipping_address.strip(),
            pin_code=pin_code.strip(),
            city=city.strip(),
            state=state.strip(),
            landmark=_clean(landmark),
            country=_clean(country) or DEFAULT_COUNTRY,
            delivery_instructions=_clean(delivery_instructions),
        )
        self.addresses.append(address)
        if should_be_default:
            self._make_default(address)

        self._assert_single_default()
        return address

    def update_address(
        self,
        address_id: str,
        *,
        is_default: bool | None = None,
        landmark=_UNSET,
        delivery_instructions=_UNSET,
        **required,
    ) -> Address:
        """Partially update an address.

        Required fields and ``country`` passed as None or blank keep their
        current value. ``landmark`` and ``delivery_instructions`` take
        whatever is passed, including None, so they can be cleared.
        """
        address = self.get(address_id)

        unknown = set(required) - set(REQUIRED_FIELDS) - {"country"}
        if unknown:
            raise ValidationError(f"Unknown address fields: {', '.join(sorted(unknown))}")

        for name, value in required.items():
            if value is None or not value.strip():
                continue
            value = value.strip()
            if name == "email":
                value = value.lower()
            setattr(address, name, value)

        if landmark is not _UNSET:
            address.landmark = _clean(landmark)
        if delivery_instructions is not _UNSET:
            address.delivery_instructions = _clean(delivery_instructions)

        if is_default is True:
            self._make_default(address)
        elif is_default is False and address.is_default:
            raise ValidationError(
                "Cannot unset the default address; set another address as default instead"
            )

        address.updated_at = _now()
        self._assert_single_default()
        return address

    def remove_address(self, address_id: str) -> Address:
        """Delete an address, promoting the newest remaining one if it was default."""
        address = self.get(address_id)
        self.addresses.remove(address)

        if address.is_default and self.addresses:
            self._make_default(self._most_recent())

        self._assert_single_default()
        return address

    def set_default(self, address_id: str) -> Address:
        address = self.get(address_id)
        self._make_default(address)
        self._assert_single_default()
        return address

    # --- Queries --------------------------------------------------------------

    def get(self, address_id: str) -> Address:
        for address in self.addresses:
            if address.id == address_id:
                return address
        raise EntityNotFoundError(f"Address '{address_id}' not found")

    @property
    def default_address(self) -> Address | None:
        return next((a for a in self.addresses if a.is_default), None)

    def ordered(self) -> list[Address]:
        """Default first, then newest first."""
        positioned = list(enumerate(self.addresses))
        positioned.sort(
            key=lambda pair: (pair[1].is_default, pair[1].created_at, pair[0]),
            reverse=True,
        )
        return [address for _, address in positioned]

    # --- Internal helpers -----------------------------------------------------

    def _make_default(self, address: Address) -> None:
        for other in self.addresses:
            other.is_default = other is address

    def _most_recent(self) -> Address:
        positioned = list(enumerate(self.addresses))
        return max(positioned, key=lambda pair: (pair[1].created_at, pair[0]))[1]

    def _assert_single_default(self) -> None:
        if not self.addresses:
            return
        defaults = [a for a in self.addresses if a.is_default]
        if len(defaults) != 1:
            raise ValidationError("Exactly one address must be marked as default")
