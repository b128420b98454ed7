"""JSON-file-backed implementation of CartRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money, Quantity
from storefront.domain.repository.cart_repository import CartRepository
from storefront.infrastructure.persistence.json_document_store import JsonDocumentStore


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._store = JsonDocumentStore(file_path, key_field="owner_id")

    # --- CartRepository interface ---------------------------------------------

    def get_by_owner(self, owner_id: str) -> Cart | None:
        raw = self._store.find(owner_id)
        return self._to_domain(raw) if raw is not None else None

    def ensure_exists(self, owner_id: str) -> Cart:
        empty = Cart(owner_id=owner_id, version=1)
        return self._to_domain(self._store.insert_if_absent(self._to_raw(empty)))

    def save(self, cart: Cart) -> None:
        cart.version = self._store.replace(self._to_raw(cart), expected_version=cart.version)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart) -> dict:
        return {
            "owner_id": cart.owner_id,
            "version": cart.version,
            "created_at": cart.created_at.isoformat(),
            "updated_at": cart.updated_at.isoformat(),
            "items": [
                {
                    "id": line.id,
                    "product_id": line.product_id,
                    "quantity": line.quantity.value,
                    "selected_color": line.selected_color,
                    "price_at_add": str(line.price_at_add.amount),
                    "currency": line.price_at_add.currency,
                    "added_at": line.added_at.isoformat(),
                }
                for line in cart.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Cart:
        items = [
            CartLine(
                id=i["id"],
                product_id=i["product_id"],
                quantity=Quantity(i["quantity"]),
                selected_color=i.get("selected_color"),
                price_at_add=Money(Decimal(i["price_at_add"]), i.get("currency", DEFAULT_CURRENCY)),
                added_at=datetime.fromisoformat(i["added_at"]),
            )
            for i in raw["items"]
        ]
        return Cart(
            owner_id=raw["owner_id"],
            items=items,
            version=raw.get("version", 0),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
