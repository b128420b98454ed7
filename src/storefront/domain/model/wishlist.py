"""Wishlist aggregate: products a user is interested in.

Membership only: no quantities, no prices, no stock rules.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.exceptions import DuplicateItemError


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class WishlistItem:
    product_id: str
    added_at: datetime = field(default_factory=_now)


@dataclass
class Wishlist:
    """Aggregate root for a user's wishlist.

    Invariant: no two items share the same ``product_id``.
    """

    owner_id: str
    items: list[WishlistItem] = field(default_factory=list)
    version: int = 0
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    def add(self, product_id: str) -> WishlistItem:
        if self.contains(product_id):
            raise DuplicateItemError(f"Product '{product_id}' is already in the wishlist")
        item = WishlistItem(product_id=product_id)
        self.items.append(item)
        self.updated_at = _now()
        return item

    def remove(self, product_id: str) -> bool:
        """Remove a product. Returns False when it was not present."""
        remaining = [item for item in self.items if item.product_id != product_id]
        if len(remaining) == len(self.items):
            return False
        self.items = remaining
        self.updated_at = _now()
        return True

    def clear(self) -> None:
        self.items = []
        self.updated_at = _now()

    def contains(self, product_id: str) -> bool:
        return any(item.product_id == product_id for item in self.items)

    @property
    def count(self) -> int:
        return len(self.items)
