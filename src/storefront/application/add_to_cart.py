"""Application service: Add To Cart use case.

Resolves the product against the catalog, then lets the Cart aggregate
merge or append the line and enforce the stock ceiling. The price
snapshot is taken from the catalog at this moment.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import InsufficientStockError
from storefront.domain.model.cart import Cart
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.catalog_lookup import CatalogLookupService

logger = structlog.get_logger(__name__)


class AddToCartHandler:

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
        quantity: int = 1,
        selected_color: str | None = None,
    ) -> Cart:
        product = self._catalog.require_active(product_id)

        cart = self._cart_repo.ensure_exists(user_id)
        try:
            line = cart.add_item(
                product_id=product.id,
                quantity=quantity,
                unit_price=product.selling_price,
                stock_available=product.stock_available,
                selected_color=selected_color,
            )
        except InsufficientStockError:
            logger.warning(
                "Add to cart rejected for stock",
                user_id=user_id,
                product_id=product_id,
                requested=quantity,
                stock_available=product.stock_available,
            )
            raise
        self._cart_repo.save(cart)

        logger.info(
            "Item added to cart",
            user_id=user_id,
            product_id=product_id,
            selected_color=selected_color,
            quantity=quantity,
            line_quantity=line.quantity.value,
        )
        return cart
