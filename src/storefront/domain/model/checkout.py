"""Checkout preview: a priced, read-only view of an order-to-be.

Nothing here is persisted: the preview is composed from cart lines and
an address at request time and discarded afterwards. Stock is not
touched and the cart is not cleared.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.address import Address
from storefront.domain.model.cart import CartLine
from storefront.domain.model.value_objects import Money


class PaymentMethod(Enum):
    CARD = "card"
    NETBANKING = "netbanking"
    UPI = "upi"
    OTHER_UPI = "other_upi"
    EMI = "emi"
    COD = "cod"

    @classmethod
    def parse(cls, raw: str | None) -> PaymentMethod:
        try:
            return cls((raw or "").strip().lower())
        except ValueError as exc:
            allowed = ", ".join(m.value for m in cls)
            raise ValidationError(
                f"Unsupported payment method {raw!r} (expected one of: {allowed})"
            ) from exc


@dataclass(frozen=True)
class DeliveryPolicy:
    """Flat delivery fee, waived once the subtotal reaches the threshold."""

    free_shipping_threshold: Money
    flat_fee: Money

    def fee_for(self, subtotal: Money) -> Money:
        if subtotal >= self.free_shipping_threshold:
            return Money(Decimal("0.00"), subtotal.currency)
        return self.flat_fee


@dataclass(frozen=True)
class OrderPreview:
    owner_id: str
    lines: list[CartLine]
    address: Address
    payment_method: PaymentMethod
    subtotal: Money
    delivery_fee: Money

    @property
    def total(self) -> Money:
        return self.subtotal + self.delivery_fee

    @property
    def total_quantity(self) -> int:
        return sum(line.quantity.value for line in self.lines)

    @staticmethod
    def build(
        owner_id: str,
        lines: list[CartLine],
        address: Address,
        payment_method: PaymentMethod,
        policy: DeliveryPolicy,
    ) -> OrderPreview:
        """Price the selected lines at their snapshot prices."""
        if not lines:
            raise ValidationError("Select at least one cart item to check out")

        subtotal = Money(Decimal("0.00"), lines[0].price_at_add.currency)
        for line in lines:
            subtotal = subtotal + line.line_total

        return OrderPreview(
            owner_id=owner_id,
            lines=list(lines),
            address=address,
            payment_method=payment_method,
            subtotal=subtotal,
            delivery_fee=policy.fee_for(subtotal),
        )
