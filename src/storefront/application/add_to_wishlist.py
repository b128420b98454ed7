"""Application service: Add To Wishlist use case."""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import DuplicateItemError
from storefront.domain.model.wishlist import Wishlist
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.wishlist_repository import WishlistRepository
from storefront.domain.service.catalog_lookup import CatalogLookupService

logger = structlog.get_logger(__name__)


class AddToWishlistHandler:

    def __init__(
        self,
        wishlist_repo: WishlistRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._wishlist_repo = wishlist_repo
        self._catalog = CatalogLookupService(product_repo)

    def handle(self, user_id: str, product_id: str) -> Wishlist:
        product = self._catalog.require_active(product_id)

        wishlist = self._wishlist_repo.ensure_exists(user_id)
        try:
            wishlist.add(product.id)
        except DuplicateItemError:
            logger.warning("Product already in wishlist", user_id=user_id, product_id=product_id)
            raise
        self._wishlist_repo.save(wishlist)

        logger.info("Product added to wishlist", user_id=user_id, product_id=product_id)
        return wishlist
