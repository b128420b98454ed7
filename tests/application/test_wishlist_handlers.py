"""Integration tests for the wishlist use cases, including move-to-cart."""

import pytest

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.add_to_wishlist import AddToWishlistHandler
from storefront.application.check_wishlist import CheckWishlistHandler, CountWishlistHandler
from storefront.application.clear_wishlist import ClearWishlistHandler
from storefront.application.move_to_cart import MoveToCartHandler
from storefront.application.remove_from_wishlist import RemoveFromWishlistHandler
from storefront.application.show_wishlist import ShowWishlistHandler
from storefront.domain.exceptions import (
    DuplicateItemError,
    EntityNotFoundError,
    ProductUnavailableError,
)
from storefront.domain.model.product import CatalogProduct, ProductStatus
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeCartRepository, FakeProductRepository, FakeWishlistRepository


def _setup() -> tuple[FakeWishlistRepository, FakeCartRepository, FakeProductRepository]:
    products = [
        CatalogProduct(id="1", name="Kurta", selling_price=Money.of("100"), stock_available=5),
        CatalogProduct(id="2", name="Dupatta", selling_price=Money.of("50"), stock_available=10),
        CatalogProduct(
            id="3", name="Lehenga", selling_price=Money.of("4000"),
            stock_available=2, status=ProductStatus.INACTIVE,
        ),
    ]
    return FakeWishlistRepository(), FakeCartRepository(), FakeProductRepository(products)


class TestAddToWishlist:

    def test_add(self):
        wishlist_repo, _, product_repo = _setup()
        AddToWishlistHandler(wishlist_repo, product_repo).handle("u1", "1")
        assert wishlist_repo.get_by_owner("u1").contains("1")

    def test_duplicate_rejected(self):
        wishlist_repo, _, product_repo = _setup()
        handler = AddToWishlistHandler(wishlist_repo, product_repo)
        handler.handle("u1", "1")
        with pytest.raises(DuplicateItemError):
            handler.handle("u1", "1")
        assert wishlist_repo.get_by_owner("u1").count == 1

    def test_inactive_rejected(self):
        wishlist_repo, _, product_repo = _setup()
        with pytest.raises(ProductUnavailableError):
            AddToWishlistHandler(wishlist_repo, product_repo).handle("u1", "3")

    def test_unknown_rejected(self):
        wishlist_repo, _, product_repo = _setup()
        with pytest.raises(EntityNotFoundError):
            AddToWishlistHandler(wishlist_repo, product_repo).handle("u1", "99")


class TestWishlistQueries:

    def test_check_and_count(self):
        wishlist_repo, _, product_repo = _setup()
        AddToWishlistHandler(wishlist_repo, product_repo).handle("u1", "1")

        assert CheckWishlistHandler(wishlist_repo).handle("u1", "1") is True
        assert CheckWishlistHandler(wishlist_repo).handle("u1", "2") is False
        assert CountWishlistHandler(wishlist_repo).handle("u1") == 1

    def test_queries_for_user_without_wishlist(self):
        wishlist_repo, _, _ = _setup()
        assert CheckWishlistHandler(wishlist_repo).handle("u1", "1") is False
        assert CountWishlistHandler(wishlist_repo).handle("u1") == 0
        assert wishlist_repo.get_by_owner("u1") is None

    def test_show_hides_unavailable_products(self):
        wishlist_repo, _, product_repo = _setup()
        handler = AddToWishlistHandler(wishlist_repo, product_repo)
        handler.handle("u1", "1")
        handler.handle("u1", "2")
        product_repo.delete("2")

        dto = ShowWishlistHandler(wishlist_repo, product_repo).handle("u1")
        assert [item.product_name for item in dto.items] == ["Kurta"]
        assert dto.items[0].current_price == "₹100.00"
        assert dto.count == 1
        assert wishlist_repo.get_by_owner("u1").count == 2


class TestRemoveAndClear:

    def test_remove(self):
        wishlist_repo, _, product_repo = _setup()
        AddToWishlistHandler(wishlist_repo, product_repo).handle("u1", "1")
        RemoveFromWishlistHandler(wishlist_repo).handle("u1", "1")
        assert wishlist_repo.get_by_owner("u1").count == 0

    def test_remove_missing_is_noop(self):
        wishlist_repo, _, _ = _setup()
        RemoveFromWishlistHandler(wishlist_repo).handle("u1", "1")
        assert wishlist_repo.save_count == 0

    def test_clear(self):
        wishlist_repo, _, product_repo = _setup()
        handler = AddToWishlistHandler(wishlist_repo, product_repo)
        handler.handle("u1", "1")
        handler.handle("u1", "2")
        ClearWishlistHandler(wishlist_repo).handle("u1")
        assert wishlist_repo.get_by_owner("u1").count == 0


class TestMoveToCart:

    def _handler(self, wishlist_repo, cart_repo, product_repo) -> MoveToCartHandler:
        return MoveToCartHandler(wishlist_repo, cart_repo, product_repo)

    def test_moves_one_unit(self):
        wishlist_repo, cart_repo, product_repo = _setup()
        AddToWishlistHandler(wishlist_repo, product_repo).handle("u1", "1")

        self._handler(wishlist_repo, cart_repo, product_repo).handle("u1", "1")

        cart = cart_repo.get_by_owner("u1")
        assert [(line.product_id, line.quantity.value) for line in cart.items] == [("1", 1)]
        assert cart.items[0].price_at_add == Money.of("100")
        assert not wishlist_repo.get_by_owner("u1").contains("1")

    def test_existing_cart_line_left_alone(self):
        wishlist_repo, cart_repo, product_repo = _setup()
        AddToCartHandler(cart_repo, product_repo).handle("u1", "1", quantity=2, selected_color="red")
        AddToWishlistHandler(wishlist_repo, product_repo).handle("u1", "1")

        self._handler(wishlist_repo, cart_repo, product_repo).handle("u1", "1")

        cart = cart_repo.get_by_owner("u1")
        assert len(cart.items) == 1
        assert cart.items[0].quantity.value == 2
        assert not wishlist_repo.get_by_owner("u1").contains("1")

    def test_not_in_wishlist(self):
        wishlist_repo, cart_repo, product_repo = _setup()
        with pytest.raises(EntityNotFoundError, match="not in the wishlist"):
            self._handler(wishlist_repo, cart_repo, product_repo).handle("u1", "1")

    def test_product_gone_keeps_wishlist_entry(self):
        wishlist_repo, cart_repo, product_repo = _setup()
        AddToWishlistHandler(wishlist_repo, product_repo).handle("u1", "1")
        product_repo.delete("1")

        with pytest.raises(EntityNotFoundError, match="no longer available"):
            self._handler(wishlist_repo, cart_repo, product_repo).handle("u1", "1")

        assert wishlist_repo.get_by_owner("u1").contains("1")
        assert cart_repo.get_by_owner("u1") is None
