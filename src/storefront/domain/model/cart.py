"""Cart aggregate — the items a user intends to purchase.

One cart per user. Lines are identified by (product_id, selected_color);
adding the same key again merges into the existing line. Stock is checked
against the catalog value handed in by the caller at every mutation, and
``price_at_add`` is captured once when a line is created.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal

from storefront.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
)
from storefront.domain.model.value_objects import Money, Quantity

LineKey = tuple[str, str | None]


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _new_line_id() -> str:
    return uuid.uuid4().hex


@dataclass
class CartLine:
    """A product in the cart with its price snapshot.

    ``price_at_add`` is locked when the line is created; later catalog
    price changes never touch it.
    """

    product_id: str
    quantity: Quantity
    price_at_add: Money
    selected_color: str | None = None
    id: str = field(default_factory=_new_line_id)
    added_at: datetime = field(default_factory=_now)

    @property
    def key(self) -> LineKey:
        return (self.product_id, self.selected_color)

    @property
    def line_total(self) -> Money:
        return self.price_at_add * self.quantity.value


@dataclass
class Cart:
    """Aggregate root for a user's shopping cart.

    Invariants:
    - every line has quantity >= 1 (guaranteed by Quantity)
    - no two lines share the same (product_id, selected_color)
    - a mutation never leaves a line above the stock it was checked against

    ``version`` is owned by the repository and used for compare-and-swap
    saves.
    """

    owner_id: str
    items: list[CartLine] = field(default_factory=list)
    version: int = 0
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    # --- Line management ------------------------------------------------------

    def add_item(
        self,
        product_id: str,
        quantity: int,
        unit_price: Money,
        stock_available: int,
        selected_color: str | None = None,
    ) -> CartLine:
        """Add *quantity* units, merging into an existing line with the same key.

        ``unit_price`` only matters when a new line is created.
        """
        qty = Quantity(quantity)
        existing = self.find_line(product_id, selected_color)
        requested = qty.value + (existing.quantity.value if existing else 0)
        self._check_stock(product_id, requested, stock_available)

        if existing is not None:
            existing.quantity = existing.quantity + qty
            line = existing
        else:
            line = CartLine(
                product_id=product_id,
                quantity=qty,
                price_at_add=unit_price,
                selected_color=selected_color,
            )
            self.items.append(line)

        self.updated_at = _now()
        return line

    def update_quantity(
        self,
        product_id: str,
        selected_color: str | None,
        new_quantity: int,
        stock_available: int,
    ) -> CartLine:
        """Set the quantity of an existing line."""
        qty = Quantity(new_quantity)
        line = self.find_line(product_id, selected_color)
        if line is None:
            raise EntityNotFoundError(
                f"Item {_describe(product_id, selected_color)} not found in cart"
            )
        self._check_stock(product_id, qty.value, stock_available)
        line.quantity = qty
        self.updated_at = _now()
        return line

    def remove_item(self, product_id: str, selected_color: str | None = None) -> bool:
        """Remove a line. Returns False when there was nothing to remove."""
        line = self.find_line(product_id, selected_color)
        if line is None:
            return False
        self.items.remove(line)
        self.updated_at = _now()
        return True

    def clear(self) -> None:
        self.items = []
        self.updated_at = _now()

    # --- Queries --------------------------------------------------------------

    def find_line(self, product_id: str, selected_color: str | None = None) -> CartLine | None:
        for line in self.items:
            if line.key == (product_id, selected_color):
                return line
        return None

    def find_line_by_id(self, line_id: str) -> CartLine | None:
        for line in self.items:
            if line.id == line_id:
                return line
        return None

    def has_product(self, product_id: str) -> bool:
        """True if any line, of any colour, references the product."""
        return any(line.product_id == product_id for line in self.items)

    @property
    def total_quantity(self) -> int:
        return sum(line.quantity.value for line in self.items)

    @property
    def total_value(self) -> Money:
        if not self.items:
            return Money.zero()
        currency = self.items[0].price_at_add.currency
        result = Money(Decimal("0.00"), currency)
        for line in self.items:
            result = result + line.line_total
        return result

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _check_stock(product_id: str, requested: int, stock_available: int) -> None:
        if requested > stock_available:
            raise InsufficientStockError(
                f"Insufficient stock for product '{product_id}' "
                f"(requested {requested}, {stock_available} available)"
            )


def _describe(product_id: str, selected_color: str | None) -> str:
    if selected_color:
        return f"'{product_id}' ({selected_color})"
    return f"'{product_id}'"
