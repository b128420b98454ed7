"""Application service: Update Address use case."""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.address import Address
from storefront.domain.repository.address_book_repository import AddressBookRepository

logger = structlog.get_logger(__name__)


class UpdateAddressHandler:

    def __init__(self, address_book_repo: AddressBookRepository) -> None:
        self._address_book_repo = address_book_repo

    def handle(self, user_id: str, address_id: str, **changes) -> Address:
        """Apply a partial update; see ``AddressBook.update_address`` for field rules."""
        book = self._address_book_repo.get_by_owner(user_id)
        if book is None:
            raise EntityNotFoundError(f"Address '{address_id}' not found")

        address = book.update_address(address_id, **changes)
        self._address_book_repo.save(book)

        logger.info(
            "Address updated",
            user_id=user_id,
            address_id=address_id,
            fields=sorted(changes),
        )
        return address
