"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Money values are
pre-formatted strings such as "₹1250.00".
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.address import Address


@dataclass(frozen=True)
class AddressSpec:
    """Input: the fields of a new address."""

    full_name: str
    mobile_number: str
    email: str
    shipping_address: str
    pin_code: str
    city: str
    state: str
    landmark: str | None = None
    country: str | None = None
    delivery_instructions: str | None = None
    is_default: bool = False


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a cart line joined with the product's current catalog data.

    ``price_at_add`` is what the customer will pay; ``current_price`` is
    the catalog's price right now. They differ once the catalog changes.
    """

    line_id: str
    product_id: str
    product_name: str
    image: str | None
    selected_color: str | None
    quantity: int
    price_at_add: str
    current_price: str
    stock_available: int
    status: str
    line_total: str

    @property
    def price_changed(self) -> bool:
        return self.price_at_add != self.current_price


@dataclass(frozen=True)
class CartDTO:
    """Output: the visible part of a cart.

    Lines for products that were deleted or deactivated are left out;
    ``hidden_line_count`` says how many.
    """

    owner_id: str
    lines: list[CartLineDTO]
    total_quantity: int
    total_value: str
    hidden_line_count: int = 0


@dataclass(frozen=True)
class CartTotalsDTO:
    total_quantity: int
    total_value: str


@dataclass(frozen=True)
class WishlistItemDTO:
    product_id: str
    product_name: str
    image: str | None
    current_price: str
    stock_available: int
    added_at: str


@dataclass(frozen=True)
class WishlistDTO:
    owner_id: str
    items: list[WishlistItemDTO]
    count: int


@dataclass(frozen=True)
class AddressDTO:
    id: str
    full_name: str
    mobile_number: str
    email: str
    shipping_address: str
    landmark: str | None
    pin_code: str
    city: str
    state: str
    country: str
    is_default: bool
    delivery_instructions: str | None

    @staticmethod
    def from_domain(address: Address) -> AddressDTO:
        return AddressDTO(
            id=address.id,
            full_name=address.full_name,
            mobile_number=address.mobile_number,
            email=address.email,
            shipping_address=address.shipping_address,
            landmark=address.landmark,
            pin_code=address.pin_code,
            city=address.city,
            state=address.state,
            country=address.country,
            is_default=address.is_default,
            delivery_instructions=address.delivery_instructions,
        )


@dataclass(frozen=True)
class CheckoutLineDTO:
    line_id: str
    product_id: str
    product_name: str
    selected_color: str | None
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class CheckoutPreviewDTO:
    """Output: a priced order preview. Nothing behind it is persisted."""

    lines: list[CheckoutLineDTO]
    address: AddressDTO
    payment_method: str
    total_quantity: int
    subtotal: str
    delivery_fee: str
    total: str
