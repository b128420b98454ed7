"""Application services: wishlist membership and count (queries).

Neither creates a wishlist; a user without one simply has none of
anything.
"""

from __future__ import annotations

from storefront.domain.repository.wishlist_repository import WishlistRepository


class CheckWishlistHandler:

    def __init__(self, wishlist_repo: WishlistRepository) -> None:
        self._wishlist_repo = wishlist_repo

    def handle(self, user_id: str, product_id: str) -> bool:
        wishlist = self._wishlist_repo.get_by_owner(user_id)
        return wishlist is not None and wishlist.contains(product_id)


class CountWishlistHandler:

    def __init__(self, wishlist_repo: WishlistRepository) -> None:
        self._wishlist_repo = wishlist_repo

    def handle(self, user_id: str) -> int:
        wishlist = self._wishlist_repo.get_by_owner(user_id)
        return wishlist.count if wishlist is not None else 0
