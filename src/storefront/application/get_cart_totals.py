"""Application service: Cart Totals use case (query).

Totals are computed from the stored lines on every read, including
lines whose product has since been hidden from the cart view.
"""

from __future__ import annotations

from storefront.application.dto import CartTotalsDTO
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.domain.repository.cart_repository import CartRepository


class GetCartTotalsHandler:

    def __init__(self, cart_repo: CartRepository, currency: str = DEFAULT_CURRENCY) -> None:
        self._cart_repo = cart_repo
        self._currency = currency

    def handle(self, user_id: str) -> CartTotalsDTO:
        cart = self._cart_repo.get_by_owner(user_id)
        if cart is None or not cart.items:
            return CartTotalsDTO(total_quantity=0, total_value=str(Money.zero(self._currency)))
        return CartTotalsDTO(
            total_quantity=cart.total_quantity,
            total_value=str(cart.total_value),
        )
