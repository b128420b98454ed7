"""Application service: Clear Wishlist use case."""

from __future__ import annotations

import structlog

from storefront.domain.model.wishlist import Wishlist
from storefront.domain.repository.wishlist_repository import WishlistRepository

logger = structlog.get_logger(__name__)


class ClearWishlistHandler:

    def __init__(self, wishlist_repo: WishlistRepository) -> None:
        self._wishlist_repo = wishlist_repo

    def handle(self, user_id: str) -> Wishlist:
        wishlist = self._wishlist_repo.ensure_exists(user_id)
        removed = wishlist.count
        wishlist.clear()
        self._wishlist_repo.save(wishlist)
        logger.info("Wishlist cleared", user_id=user_id, removed_items=removed)
        return wishlist
