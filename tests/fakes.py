"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.

The per-user fakes hand out copies and check versions on save, exactly
like the JSON store, so two handlers holding the same cart see the same
conflicts they would in production.
"""

from __future__ import annotations

import copy

from storefront.domain.exceptions import ConcurrentModificationError
from storefront.domain.model.address import AddressBook
from storefront.domain.model.cart import Cart
from storefront.domain.model.product import CatalogProduct
from storefront.domain.model.wishlist import Wishlist
from storefront.domain.repository.address_book_repository import AddressBookRepository
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.wishlist_repository import WishlistRepository


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[CatalogProduct] | None = None) -> None:
        self._store: dict[str, CatalogProduct] = {}
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: str) -> CatalogProduct | None:
        return self._store.get(product_id)

    def get_by_name(self, name: str) -> CatalogProduct | None:
        for p in self._store.values():
            if p.name.lower() == name.lower():
                return p
        return None

    def list_all(self) -> list[CatalogProduct]:
        return list(self._store.values())

    def save(self, product: CatalogProduct) -> None:
        self._store[product.id] = product

    def delete(self, product_id: str) -> None:
        """Test helper: the catalog dropping a product."""
        self._store.pop(product_id, None)


class _VersionedFake:
    """Shared behaviour: owner-keyed documents with compare-and-swap saves."""

    def __init__(self, factory) -> None:
        self._factory = factory
        self._store: dict = {}
        self.save_count = 0

    def get_by_owner(self, owner_id: str):
        stored = self._store.get(owner_id)
        return copy.deepcopy(stored) if stored is not None else None

    def ensure_exists(self, owner_id: str):
        if owner_id not in self._store:
            self._store[owner_id] = self._factory(owner_id=owner_id, version=1)
        return copy.deepcopy(self._store[owner_id])

    def save(self, aggregate) -> None:
        stored = self._store.get(aggregate.owner_id)
        stored_version = stored.version if stored is not None else 0
        if stored_version != aggregate.version:
            raise ConcurrentModificationError(
                f"Document '{aggregate.owner_id}' was modified concurrently "
                f"(expected version {aggregate.version}, found {stored_version})"
            )
        aggregate.version += 1
        self._store[aggregate.owner_id] = copy.deepcopy(aggregate)
        self.save_count += 1


class FakeCartRepository(_VersionedFake, CartRepository):

    def __init__(self) -> None:
        super().__init__(Cart)


class FakeWishlistRepository(_VersionedFake, WishlistRepository):

    def __init__(self) -> None:
        super().__init__(Wishlist)


class FakeAddressBookRepository(_VersionedFake, AddressBookRepository):

    def __init__(self) -> None:
        super().__init__(AddressBook)
