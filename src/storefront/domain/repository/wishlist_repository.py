"""Abstract repository for the Wishlist aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.wishlist import Wishlist


class WishlistRepository(ABC):

    @abstractmethod
    def get_by_owner(self, owner_id: str) -> Wishlist | None:
        """Return the user's wishlist, or None if it was never created."""

    @abstractmethod
    def ensure_exists(self, owner_id: str) -> Wishlist:
        """Atomically create an empty wishlist if none exists; return the stored one."""

    @abstractmethod
    def save(self, wishlist: Wishlist) -> None:
        """Versioned save; raises ConcurrentModificationError on a stale version."""
