"""Integration tests for the catalog admin use cases."""

import pytest

from storefront.application.add_product import AddProductHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.product import ProductStatus
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeProductRepository


class TestAddProduct:

    def test_sequential_ids(self):
        repo = FakeProductRepository()
        handler = AddProductHandler(repo)
        first = handler.handle("Kurta", "100", stock=5)
        second = handler.handle("Dupatta", "50")
        assert (first.id, second.id) == ("1", "2")
        assert second.stock_available == 0

    def test_duplicate_name_rejected(self):
        repo = FakeProductRepository()
        handler = AddProductHandler(repo)
        handler.handle("Kurta", "100")
        with pytest.raises(ValidationError, match="already exists"):
            handler.handle("kurta", "120")

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            AddProductHandler(FakeProductRepository()).handle("  ", "100")

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError, match="Unknown product status"):
            AddProductHandler(FakeProductRepository()).handle("Kurta", "100", status="archived")

    def test_currency_from_handler(self):
        product = AddProductHandler(FakeProductRepository(), currency="USD").handle("Tee", "9.5")
        assert str(product.selling_price) == "$9.50"


class TestUpdateProduct:

    def test_update_price_stock_and_status(self):
        repo = FakeProductRepository()
        AddProductHandler(repo).handle("Kurta", "100", stock=5)

        UpdateProductHandler(repo).handle("1", new_price="80", stock=2, status="inactive")

        product = repo.get_by_id("1")
        assert product.selling_price == Money.of("80")
        assert product.stock_available == 2
        assert product.status == ProductStatus.INACTIVE

    def test_unknown_product(self):
        with pytest.raises(EntityNotFoundError):
            UpdateProductHandler(FakeProductRepository()).handle("9", new_price="1")

    def test_nothing_to_update(self):
        with pytest.raises(ValidationError, match="Nothing to update"):
            UpdateProductHandler(FakeProductRepository()).handle("1")


class TestListProducts:

    def test_sorted_by_numeric_id(self):
        repo = FakeProductRepository()
        handler = AddProductHandler(repo)
        for i in range(11):
            handler.handle(f"Item {i}", "10")
        ids = [p.id for p in ListProductsHandler(repo).handle()]
        assert ids[-2:] == ["10", "11"]
