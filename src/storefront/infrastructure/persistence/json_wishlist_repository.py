"""JSON-file-backed implementation of WishlistRepository."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from storefront.domain.model.wishlist import Wishlist, WishlistItem
from storefront.domain.repository.wishlist_repository import WishlistRepository
from storefront.infrastructure.persistence.json_document_store import JsonDocumentStore


class JsonWishlistRepository(WishlistRepository):

    def __init__(self, file_path: Path) -> None:
        self._store = JsonDocumentStore(file_path, key_field="owner_id")

    # --- WishlistRepository interface -----------------------------------------

    def get_by_owner(self, owner_id: str) -> Wishlist | None:
        raw = self._store.find(owner_id)
        return self._to_domain(raw) if raw is not None else None

    def ensure_exists(self, owner_id: str) -> Wishlist:
        empty = Wishlist(owner_id=owner_id, version=1)
        return self._to_domain(self._store.insert_if_absent(self._to_raw(empty)))

    def save(self, wishlist: Wishlist) -> None:
        wishlist.version = self._store.replace(
            self._to_raw(wishlist), expected_version=wishlist.version
        )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(wishlist: Wishlist) -> dict:
        return {
            "owner_id": wishlist.owner_id,
            "version": wishlist.version,
            "created_at": wishlist.created_at.isoformat(),
            "updated_at": wishlist.updated_at.isoformat(),
            "items": [
                {"product_id": item.product_id, "added_at": item.added_at.isoformat()}
                for item in wishlist.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Wishlist:
        return Wishlist(
            owner_id=raw["owner_id"],
            items=[
                WishlistItem(
                    product_id=i["product_id"],
                    added_at=datetime.fromisoformat(i["added_at"]),
                )
                for i in raw["items"]
            ],
            version=raw.get("version", 0),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
