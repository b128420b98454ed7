"""Tests for the JSON-file repositories, against a temporary directory."""

import json

import pytest

from storefront.domain.exceptions import ConcurrentModificationError
from storefront.domain.model.product import CatalogProduct, ProductStatus
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.persistence.json_address_book_repository import (
    JsonAddressBookRepository,
)
from storefront.infrastructure.persistence.json_cart_repository import JsonCartRepository
from storefront.infrastructure.persistence.json_product_repository import JsonProductRepository
from storefront.infrastructure.persistence.json_wishlist_repository import (
    JsonWishlistRepository,
)


class TestJsonProductRepository:

    def test_round_trip(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(CatalogProduct(
            id="1", name="Kurta", selling_price=Money.of("1299.50"),
            stock_available=4, status=ProductStatus.DRAFT, image="kurta.png",
        ))

        product = JsonProductRepository(tmp_path / "products.json").get_by_id("1")
        assert product.selling_price == Money.of("1299.50")
        assert product.status == ProductStatus.DRAFT
        assert product.image == "kurta.png"
        assert repo.get_by_name("KURTA").id == "1"

    def test_missing_file_is_created_empty(self, tmp_path):
        path = tmp_path / "nested" / "products.json"
        repo = JsonProductRepository(path)
        assert repo.list_all() == []
        assert json.loads(path.read_text()) == []


class TestJsonCartRepository:

    def test_ensure_exists_then_save(self, tmp_path):
        repo = JsonCartRepository(tmp_path / "carts.json")
        cart = repo.ensure_exists("u1")
        assert cart.version == 1

        cart.add_item("p1", 2, Money.of("100"), stock_available=5, selected_color="red")
        repo.save(cart)
        assert cart.version == 2

        loaded = JsonCartRepository(tmp_path / "carts.json").get_by_owner("u1")
        line = loaded.items[0]
        assert (line.product_id, line.selected_color, line.quantity.value) == ("p1", "red", 2)
        assert line.price_at_add == Money.of("100")
        assert line.id == cart.items[0].id

    def test_ensure_exists_keeps_existing(self, tmp_path):
        repo = JsonCartRepository(tmp_path / "carts.json")
        cart = repo.ensure_exists("u1")
        cart.add_item("p1", 1, Money.of("100"), stock_available=5)
        repo.save(cart)
        assert len(repo.ensure_exists("u1").items) == 1

    def test_stale_write_rejected(self, tmp_path):
        repo = JsonCartRepository(tmp_path / "carts.json")
        first = repo.ensure_exists("u1")
        second = repo.get_by_owner("u1")

        first.add_item("p1", 1, Money.of("100"), stock_available=5)
        repo.save(first)
        second.add_item("p2", 1, Money.of("100"), stock_available=5)

        with pytest.raises(ConcurrentModificationError):
            repo.save(second)
        assert [line.product_id for line in repo.get_by_owner("u1").items] == ["p1"]

    def test_unknown_owner(self, tmp_path):
        assert JsonCartRepository(tmp_path / "carts.json").get_by_owner("nobody") is None


class TestJsonWishlistRepository:

    def test_round_trip(self, tmp_path):
        repo = JsonWishlistRepository(tmp_path / "wishlists.json")
        wishlist = repo.ensure_exists("u1")
        wishlist.add("p1")
        repo.save(wishlist)

        loaded = repo.get_by_owner("u1")
        assert loaded.contains("p1")
        assert loaded.items[0].added_at == wishlist.items[0].added_at


class TestJsonAddressBookRepository:

    def test_round_trip(self, tmp_path):
        repo = JsonAddressBookRepository(tmp_path / "address_books.json")
        book = repo.ensure_exists("u1")
        book.add_address(
            full_name="Asha Rao",
            mobile_number="9876543210",
            email="asha@example.com",
            shipping_address="12 MG Road",
            pin_code="560001",
            city="Bengaluru",
            state="Karnataka",
            landmark="Opp. metro",
        )
        repo.save(book)

        loaded = repo.get_by_owner("u1")
        address = loaded.addresses[0]
        assert address.is_default
        assert address.landmark == "Opp. metro"
        assert address.country == "India"
        assert address.delivery_instructions is None
        assert loaded.version == 2
