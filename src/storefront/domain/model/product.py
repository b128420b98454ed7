"""CatalogProduct aggregate.

Products belong to the catalog, which the shopping core only reads:
carts and wishlists hold weak references to them by id. The mutations
here exist so the catalog can be seeded and adjusted from the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


class ProductStatus(Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    DRAFT = "draft"


@dataclass
class CatalogProduct:
    """A product as the shopping core sees it.

    Invariants:
    - ``selling_price`` is never negative (guaranteed by Money)
    - ``stock_available`` is never negative
    """

    id: str
    name: str
    selling_price: Money
    stock_available: int = 0
    status: ProductStatus = ProductStatus.ACTIVE
    image: str | None = None

    def __post_init__(self) -> None:
        if self.stock_available < 0:
            raise ValidationError("Available stock cannot be negative")

    @property
    def is_active(self) -> bool:
        return self.status == ProductStatus.ACTIVE

    def update_price(self, new_price: Money) -> None:
        """Change the selling price.

        Existing cart lines keep the price they were added at.
        """
        self.selling_price = new_price

    def set_stock(self, available: int) -> None:
        if available < 0:
            raise ValidationError("Available stock cannot be negative")
        self.stock_available = available

    def set_status(self, status: ProductStatus) -> None:
        self.status = status
