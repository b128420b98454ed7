"""Application service: Remove Address use case.

Removing the default hands the flag to the most recently created of the
remaining addresses.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.address_book_repository import AddressBookRepository

logger = structlog.get_logger(__name__)


class RemoveAddressHandler:

    def __init__(self, address_book_repo: AddressBookRepository) -> None:
        self._address_book_repo = address_book_repo

    def handle(self, user_id: str, address_id: str) -> None:
        book = self._address_book_repo.get_by_owner(user_id)
        if book is None:
            raise EntityNotFoundError(f"Address '{address_id}' not found")

        removed = book.remove_address(address_id)
        self._address_book_repo.save(book)

        new_default = book.default_address
        logger.info(
            "Address removed",
            user_id=user_id,
            address_id=address_id,
            was_default=removed.is_default,
            new_default_id=new_default.id if new_default else None,
        )
