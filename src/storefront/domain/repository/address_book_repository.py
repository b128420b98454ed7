"""Abstract repository for the AddressBook aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.address import AddressBook


class AddressBookRepository(ABC):

    @abstractmethod
    def get_by_owner(self, owner_id: str) -> AddressBook | None:
        """Return the user's address book, or None if it was never created."""

    @abstractmethod
    def ensure_exists(self, owner_id: str) -> AddressBook:
        """Atomically create an empty address book if none exists; return it."""

    @abstractmethod
    def save(self, book: AddressBook) -> None:
        """Versioned save; raises ConcurrentModificationError on a stale version."""
