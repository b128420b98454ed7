"""Application services: address queries."""

from __future__ import annotations

from storefront.application.dto import AddressDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.address_book_repository import AddressBookRepository


class ListAddressesHandler:

    def __init__(self, address_book_repo: AddressBookRepository) -> None:
        self._address_book_repo = address_book_repo

    def handle(self, user_id: str) -> list[AddressDTO]:
        """Default first, then newest first."""
        book = self._address_book_repo.get_by_owner(user_id)
        if book is None:
            return []
        return [AddressDTO.from_domain(a) for a in book.ordered()]


class ShowAddressHandler:

    def __init__(self, address_book_repo: AddressBookRepository) -> None:
        self._address_book_repo = address_book_repo

    def handle(self, user_id: str, address_id: str) -> AddressDTO:
        book = self._address_book_repo.get_by_owner(user_id)
        if book is None:
            raise EntityNotFoundError(f"Address '{address_id}' not found")
        return AddressDTO.from_domain(book.get(address_id))
