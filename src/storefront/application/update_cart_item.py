"""Application service: Update Cart Item quantity use case.

Stock is re-read from the catalog on every call; the cart never trusts
a value it saw earlier.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.catalog_lookup import CatalogLookupService

logger = structlog.get_logger(__name__)


class UpdateCartItemHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._catalog = CatalogLookupService(product_repo)

    def handle(
        self,
        user_id: str,
        product_id: str,
        new_quantity: int,
        selected_color: str | None = None,
    ) -> Cart:
        if new_quantity < 1:
            raise ValidationError("Quantity must be at least 1")

        cart = self._cart_repo.ensure_exists(user_id)
        if cart.find_line(product_id, selected_color) is None:
            raise EntityNotFoundError(f"Item '{product_id}' not found in cart")

        product = self._catalog.require_existing(product_id)
        cart.update_quantity(
            product_id=product_id,
            selected_color=selected_color,
            new_quantity=new_quantity,
            stock_available=product.stock_available,
        )
        self._cart_repo.save(cart)

        logger.info(
            "Cart quantity updated",
            user_id=user_id,
            product_id=product_id,
            selected_color=selected_color,
            new_quantity=new_quantity,
        )
        return cart
