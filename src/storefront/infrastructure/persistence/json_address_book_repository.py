"""JSON-file-backed implementation of AddressBookRepository."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from storefront.domain.model.address import DEFAULT_COUNTRY, Address, AddressBook
from storefront.domain.repository.address_book_repository import AddressBookRepository
from storefront.infrastructure.persistence.json_document_store import JsonDocumentStore


class JsonAddressBookRepository(AddressBookRepository):

    def __init__(self, file_path: Path) -> None:
        self._store = JsonDocumentStore(file_path, key_field="owner_id")

    # --- AddressBookRepository interface --------------------------------------

    def get_by_owner(self, owner_id: str) -> AddressBook | None:
        raw = self._store.find(owner_id)
        return self._to_domain(raw) if raw is not None else None

    def ensure_exists(self, owner_id: str) -> AddressBook:
        empty = AddressBook(owner_id=owner_id, version=1)
        return self._to_domain(self._store.insert_if_absent(self._to_raw(empty)))

    def save(self, book: AddressBook) -> None:
        book.version = self._store.replace(self._to_raw(book), expected_version=book.version)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(book: AddressBook) -> dict:
        return {
            "owner_id": book.owner_id,
            "version": book.version,
            "addresses": [
                {
                    "id": a.id,
                    "full_name": a.full_name,
                    "mobile_number": a.mobile_number,
                    "email": a.email,
                    "shipping_address": a.shipping_address,
                    "landmark": a.landmark,
                    "pin_code": a.pin_code,
                    "city": a.city,
                    "state": a.state,
                    "country": a.country,
                    "is_default": a.is_default,
                    "delivery_instructions": a.delivery_instructions,
                    "created_at": a.created_at.isoformat(),
                    "updated_at": a.updated_at.isoformat(),
                }
                for a in book.addresses
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> AddressBook:
        addresses = [
            Address(
                id=a["id"],
                full_name=a["full_name"],
                mobile_number=a["mobile_number"],
                email=a["email"],
                shipping_address=a["shipping_address"],
                landmark=a.get("landmark"),
                pin_code=a["pin_code"],
                city=a["city"],
                state=a["state"],
                country=a.get("country") or DEFAULT_COUNTRY,
                is_default=a.get("is_default", False),
                delivery_instructions=a.get("delivery_instructions"),
                created_at=datetime.fromisoformat(a["created_at"]),
                updated_at=datetime.fromisoformat(a["updated_at"]),
            )
            for a in raw["addresses"]
        ]
        return AddressBook(
            owner_id=raw["owner_id"],
            addresses=addresses,
            version=raw.get("version", 0),
        )
