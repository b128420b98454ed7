"""Application service: Clear Cart use case.

The cart document stays; only its lines go.
"""

from __future__ import annotations

import structlog

from storefront.domain.model.cart import Cart
from storefront.domain.repository.cart_repository import CartRepository

logger = structlog.get_logger(__name__)


class ClearCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, user_id: str) -> Cart:
        cart = self._cart_repo.ensure_exists(user_id)
        removed = len(cart.items)
        cart.clear()
        self._cart_repo.save(cart)
        logger.info("Cart cleared", user_id=user_id, removed_lines=removed)
        return cart
