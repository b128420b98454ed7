"""Unit tests for the CatalogProduct aggregate."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import CatalogProduct, ProductStatus
from storefront.domain.model.value_objects import Money


def _product(**overrides) -> CatalogProduct:
    fields = dict(id="1", name="Kurta", selling_price=Money.of("100"), stock_available=5)
    fields.update(overrides)
    return CatalogProduct(**fields)


class TestCatalogProduct:

    def test_active_by_default(self):
        assert _product().is_active

    def test_inactive_and_draft_are_not_active(self):
        assert not _product(status=ProductStatus.INACTIVE).is_active
        assert not _product(status=ProductStatus.DRAFT).is_active

    def test_negative_stock_rejected_on_creation(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _product(stock_available=-1)

    def test_set_stock(self):
        p = _product()
        p.set_stock(0)
        assert p.stock_available == 0

    def test_set_negative_stock_rejected(self):
        p = _product()
        with pytest.raises(ValidationError, match="cannot be negative"):
            p.set_stock(-2)

    def test_update_price(self):
        p = _product()
        p.update_price(Money.of("80"))
        assert p.selling_price == Money.of("80")

    def test_set_status(self):
        p = _product()
        p.set_status(ProductStatus.INACTIVE)
        assert p.status == ProductStatus.INACTIVE
