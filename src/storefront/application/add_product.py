"""Application service: Add Product use case (catalog admin)."""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import CatalogProduct, ProductStatus
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


def parse_status(raw: str) -> ProductStatus:
    try:
        return ProductStatus(raw.strip().lower())
    except ValueError as exc:
        allowed = ", ".join(s.value for s in ProductStatus)
        raise ValidationError(f"Unknown product status {raw!r} (expected one of: {allowed})") from exc


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository, currency: str = DEFAULT_CURRENCY) -> None:
        self._product_repo = product_repo
        self._currency = currency

    def handle(
        self,
        name: str,
        price: str,
        stock: int = 0,
        status: str = "active",
        image: str | None = None,
    ) -> CatalogProduct:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        existing = self._product_repo.get_by_name(name.strip())
        if existing is not None:
            raise ValidationError(f"Product '{name.strip()}' already exists")

        # Auto-assign ID based on existing products
        all_products = self._product_repo.list_all()
        if all_products:
            next_id = str(max(int(p.id) for p in all_products) + 1)
        else:
            next_id = "1"

        product = CatalogProduct(
            id=next_id,
            name=name.strip(),
            selling_price=Money.of(price, self._currency),
            stock_available=stock,
            status=parse_status(status),
            image=image,
        )
        self._product_repo.save(product)

        logger.info("Product added", product_id=product.id, name=product.name)
        return product
