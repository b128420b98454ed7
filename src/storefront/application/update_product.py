"""Application service: Update Product use case (catalog admin)."""

from __future__ import annotations

import structlog

from storefront.application.add_product import parse_status
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.product import CatalogProduct
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        new_price: str | None = None,
        stock: int | None = None,
        status: str | None = None,
    ) -> CatalogProduct:
        """Change a product's price, stock or status.

        This does NOT affect existing cart lines: they captured a price
        snapshot when they were added.
        """
        if new_price is None and stock is None and status is None:
            raise ValidationError("Nothing to update")

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if new_price is not None:
            product.update_price(Money.of(new_price, product.selling_price.currency))
        if stock is not None:
            product.set_stock(stock)
        if status is not None:
            product.set_status(parse_status(status))
        self._product_repo.save(product)

        logger.info(
            "Product updated",
            product_id=product_id,
            price=str(product.selling_price),
            stock_available=product.stock_available,
            status=product.status.value,
        )
        return product
