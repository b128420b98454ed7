"""Abstract repository for the Cart aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def get_by_owner(self, owner_id: str) -> Cart | None:
        """Return the user's cart, or None if it was never created."""

    @abstractmethod
    def ensure_exists(self, owner_id: str) -> Cart:
        """Atomically create an empty cart if none exists; return the stored cart."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist the cart if its version still matches the stored one.

        Raises ConcurrentModificationError otherwise. On success the
        cart's ``version`` is advanced.
        """
