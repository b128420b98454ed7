"""Application service: Preview Checkout use case (query).

Prices the selected cart lines at their snapshot prices, adds the
delivery fee and pairs the result with one of the user's addresses.
Nothing is written: stock stays as it is and the cart is not cleared.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import (
    AddressDTO,
    CheckoutLineDTO,
    CheckoutPreviewDTO,
)
from storefront.domain.exceptions import (
    EntityNotFoundError,
    ProductUnavailableError,
    ValidationError,
)
from storefront.domain.model.cart import CartLine
from storefront.domain.model.checkout import DeliveryPolicy, OrderPreview, PaymentMethod
from storefront.domain.repository.address_book_repository import AddressBookRepository
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.catalog_lookup import CatalogLookupService, Resolved

logger = structlog.get_logger(__name__)


class PreviewCheckoutHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        address_book_repo: AddressBookRepository,
        product_repo: ProductRepository,
        delivery_policy: DeliveryPolicy,
    ) -> None:
        self._cart_repo = cart_repo
        self._address_book_repo = address_book_repo
        self._catalog = CatalogLookupService(product_repo)
        self._delivery_policy = delivery_policy

    def handle(
        self,
        user_id: str,
        selected_line_ids: list[str],
        address_id: str,
        payment_method: str,
    ) -> CheckoutPreviewDTO:
        if not selected_line_ids:
            raise ValidationError("Select at least one cart item to check out")
        method = PaymentMethod.parse(payment_method)

        book = self._address_book_repo.get_by_owner(user_id)
        if book is None:
            raise EntityNotFoundError(f"Address '{address_id}' not found")
        address = book.get(address_id)

        cart = self._cart_repo.get_by_owner(user_id)
        lines: list[CartLine] = []
        names: dict[str, str] = {}
        for line_id in dict.fromkeys(selected_line_ids):
            line = cart.find_line_by_id(line_id) if cart is not None else None
            if line is None:
                raise EntityNotFoundError(f"Cart item '{line_id}' not found")

            lookup = self._catalog.resolve(line.product_id)
            if not (isinstance(lookup, Resolved) and lookup.is_actionable):
                raise ProductUnavailableError(
                    f"Product '{line.product_id}' in cart item '{line_id}' is no longer available"
                )
            names[line.id] = lookup.product.name
            lines.append(line)

        preview = OrderPreview.build(
            owner_id=user_id,
            lines=lines,
            address=address,
            payment_method=method,
            policy=self._delivery_policy,
        )

        logger.info(
            "Checkout previewed",
            user_id=user_id,
            line_count=len(lines),
            subtotal=str(preview.subtotal),
            delivery_fee=str(preview.delivery_fee),
            payment_method=method.value,
        )
        return CheckoutPreviewDTO(
            lines=[
                CheckoutLineDTO(
                    line_id=line.id,
                    product_id=line.product_id,
                    product_name=names[line.id],
                    selected_color=line.selected_color,
                    quantity=line.quantity.value,
                    unit_price=str(line.price_at_add),
                    line_total=str(line.line_total),
                )
                for line in preview.lines
            ],
            address=AddressDTO.from_domain(preview.address),
            payment_method=preview.payment_method.value,
            total_quantity=preview.total_quantity,
            subtotal=str(preview.subtotal),
            delivery_fee=str(preview.delivery_fee),
            total=str(preview.total),
        )
