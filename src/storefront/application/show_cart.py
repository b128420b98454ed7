"""Application service: Show Cart use case (query).

Creates the cart on first read, then joins each line with the catalog's
current data. Lines whose product was deleted or is no longer active are
left out of the view but stay in the stored cart, so they reappear if
the product is reactivated.
"""

from __future__ import annotations

from decimal import Decimal

from storefront.application.dto import CartDTO, CartLineDTO
from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.product import CatalogProduct
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.catalog_lookup import CatalogLookupService, Resolved


class ShowCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._cart_repo = cart_repo
        self._catalog = CatalogLookupService(product_repo)
        self._currency = currency

    def handle(self, user_id: str) -> CartDTO:
        cart = self._cart_repo.ensure_exists(user_id)
        return self._to_dto(cart)

    # --- Mapping --------------------------------------------------------------

    def _to_dto(self, cart: Cart) -> CartDTO:
        lookups = self._catalog.resolve_many([line.product_id for line in cart.items])

        visible: list[tuple[CartLine, CatalogProduct]] = []
        for line in cart.items:
            lookup = lookups[line.product_id]
            if isinstance(lookup, Resolved) and lookup.is_actionable:
                visible.append((line, lookup.product))

        total_value = Money.zero(self._currency)
        if visible:
            total_value = Money(Decimal("0.00"), visible[0][0].price_at_add.currency)
            for line, _ in visible:
                total_value = total_value + line.line_total

        return CartDTO(
            owner_id=cart.owner_id,
            lines=[self._line_to_dto(line, product) for line, product in visible],
            total_quantity=sum(line.quantity.value for line, _ in visible),
            total_value=str(total_value),
            hidden_line_count=len(cart.items) - len(visible),
        )

    @staticmethod
    def _line_to_dto(line: CartLine, product: CatalogProduct) -> CartLineDTO:
        return CartLineDTO(
            line_id=line.id,
            product_id=line.product_id,
            product_name=product.name,
            image=product.image,
            selected_color=line.selected_color,
            quantity=line.quantity.value,
            price_at_add=str(line.price_at_add),
            current_price=str(product.selling_price),
            stock_available=product.stock_available,
            status=product.status.value,
            line_total=str(line.line_total),
        )
