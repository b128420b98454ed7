"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions. Settings are read from
the environment on each call so a changed ``STOREFRONT_DATA_DIR`` takes
effect without re-importing anything.
"""

from __future__ import annotations

from storefront.domain.model.checkout import DeliveryPolicy
from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.json_address_book_repository import (
    JsonAddressBookRepository,
)
from storefront.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_wishlist_repository import (
    JsonWishlistRepository,
)


def settings() -> Settings:
    return Settings.from_env()


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().data_dir / "products.json")


def cart_repository() -> JsonCartRepository:
    return JsonCartRepository(settings().data_dir / "carts.json")


def wishlist_repository() -> JsonWishlistRepository:
    return JsonWishlistRepository(settings().data_dir / "wishlists.json")


def address_book_repository() -> JsonAddressBookRepository:
    return JsonAddressBookRepository(settings().data_dir / "address_books.json")


def delivery_policy() -> DeliveryPolicy:
    return settings().delivery_policy()
