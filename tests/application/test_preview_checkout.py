"""Integration tests for the PreviewCheckout use case."""

import pytest

from storefront.application.add_address import AddAddressHandler
from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.dto import AddressSpec
from storefront.application.preview_checkout import PreviewCheckoutHandler
from storefront.domain.exceptions import (
    EntityNotFoundError,
    ProductUnavailableError,
    ValidationError,
)
from storefront.domain.model.checkout import DeliveryPolicy
from storefront.domain.model.product import CatalogProduct, ProductStatus
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeAddressBookRepository, FakeCartRepository, FakeProductRepository

_POLICY = DeliveryPolicy(free_shipping_threshold=Money.of("500"), flat_fee=Money.of("250"))


def _setup():
    """Cart with 2 x ₹100 and 1 x ₹50, plus one saved address."""
    product_repo = FakeProductRepository([
        CatalogProduct(id="1", name="Kurta", selling_price=Money.of("100"), stock_available=5),
        CatalogProduct(id="2", name="Dupatta", selling_price=Money.of("50"), stock_available=10),
    ])
    cart_repo = FakeCartRepository()
    book_repo = FakeAddressBookRepository()

    add = AddToCartHandler(cart_repo, product_repo)
    add.handle("u1", "1", quantity=2)
    cart = add.handle("u1", "2", quantity=1)
    line_ids = [line.id for line in cart.items]

    address = AddAddressHandler(book_repo).handle("u1", AddressSpec(
        full_name="Asha Rao",
        mobile_number="9876543210",
        email="asha@example.com",
        shipping_address="12 MG Road",
        pin_code="560001",
        city="Bengaluru",
        state="Karnataka",
    ))
    handler = PreviewCheckoutHandler(cart_repo, book_repo, product_repo, _POLICY)
    return handler, line_ids, address.id, cart_repo, product_repo


class TestPreviewCheckout:

    def test_totals_with_delivery_fee(self):
        handler, line_ids, address_id, _, _ = _setup()
        dto = handler.handle("u1", line_ids, address_id, "cod")

        assert dto.subtotal == "₹250.00"
        assert dto.delivery_fee == "₹250.00"
        assert dto.total == "₹500.00"
        assert dto.total_quantity == 3
        assert dto.payment_method == "cod"
        assert dto.address.full_name == "Asha Rao"

    def test_subset_of_lines(self):
        handler, line_ids, address_id, _, _ = _setup()
        dto = handler.handle("u1", line_ids[:1], address_id, "upi")
        assert [line.product_name for line in dto.lines] == ["Kurta"]
        assert dto.subtotal == "₹200.00"

    def test_snapshot_price_is_used(self):
        handler, line_ids, address_id, _, product_repo = _setup()
        product = product_repo.get_by_id("1")
        product.update_price(Money.of("80"))
        product_repo.save(product)

        dto = handler.handle("u1", line_ids[:1], address_id, "card")
        assert dto.lines[0].unit_price == "₹100.00"

    def test_preview_does_not_touch_cart(self):
        handler, line_ids, address_id, cart_repo, _ = _setup()
        before = cart_repo.save_count
        handler.handle("u1", line_ids, address_id, "cod")
        assert cart_repo.save_count == before
        assert len(cart_repo.get_by_owner("u1").items) == 2

    def test_empty_selection_rejected(self):
        handler, _, address_id, _, _ = _setup()
        with pytest.raises(ValidationError, match="at least one"):
            handler.handle("u1", [], address_id, "cod")

    def test_unknown_payment_method_rejected(self):
        handler, line_ids, address_id, _, _ = _setup()
        with pytest.raises(ValidationError, match="Unsupported payment method"):
            handler.handle("u1", line_ids, address_id, "cheque")

    def test_unknown_address_rejected(self):
        handler, line_ids, _, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Address"):
            handler.handle("u1", line_ids, "missing", "cod")

    def test_other_users_address_rejected(self):
        handler, line_ids, address_id, _, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            handler.handle("u2", line_ids, address_id, "cod")

    def test_unknown_line_rejected(self):
        handler, _, address_id, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Cart item"):
            handler.handle("u1", ["nope"], address_id, "cod")

    def test_unavailable_product_rejected(self):
        handler, line_ids, address_id, _, product_repo = _setup()
        product = product_repo.get_by_id("2")
        product.set_status(ProductStatus.INACTIVE)
        product_repo.save(product)

        with pytest.raises(ProductUnavailableError):
            handler.handle("u1", line_ids, address_id, "cod")
