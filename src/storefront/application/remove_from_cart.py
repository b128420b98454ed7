"""Application service: Remove From Cart use case."""

from __future__ import annotations

import structlog

from storefront.domain.model.cart import Cart
from storefront.domain.repository.cart_repository import CartRepository

logger = structlog.get_logger(__name__)


class RemoveFromCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(
        self,
        user_id: str,
        product_id: str,
        selected_color: str | None = None,
    ) -> Cart:
        """Remove a line. Removing something that is not there is not an error."""
        cart = self._cart_repo.ensure_exists(user_id)
        if cart.remove_item(product_id, selected_color):
            self._cart_repo.save(cart)
            logger.info(
                "Item removed from cart",
                user_id=user_id,
                product_id=product_id,
                selected_color=selected_color,
            )
        return cart
