"""Application service: Move Wishlist item To Cart use case.

Touches two aggregates without a transaction spanning them. The cart
is written first and the wishlist second, so a failure between the two
writes leaves the product in both places; it is never lost from both.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.wishlist_repository import WishlistRepository
from storefront.domain.service.catalog_lookup import CatalogLookupService, Resolved

logger = structlog.get_logger(__name__)


class MoveToCartHandler:

    def __init__(
        self,
        wishlist_repo: WishlistRepository,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._wishlist_repo = wishlist_repo
        self._cart_repo = cart_repo
        self._catalog = CatalogLookupService(product_repo)

    def handle(self, user_id: str, product_id: str) -> None:
        wishlist = self._wishlist_repo.ensure_exists(user_id)
        if not wishlist.contains(product_id):
            raise EntityNotFoundError(f"Product '{product_id}' is not in the wishlist")

        lookup = self._catalog.resolve(product_id)
        if not (isinstance(lookup, Resolved) and lookup.is_actionable):
            raise EntityNotFoundError(f"Product '{product_id}' is no longer available")
        product = lookup.product

        # Step 1: cart. An existing line for the product (any colour) is left alone.
        cart = self._cart_repo.ensure_exists(user_id)
        if not cart.has_product(product_id):
            cart.add_item(
                product_id=product.id,
                quantity=1,
                unit_price=product.selling_price,
                stock_available=product.stock_available,
            )
            self._cart_repo.save(cart)

        # Step 2: wishlist
        wishlist.remove(product_id)
        self._wishlist_repo.save(wishlist)

        logger.info("Wishlist item moved to cart", user_id=user_id, product_id=product_id)
