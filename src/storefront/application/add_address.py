"""Application service: Add Address use case.

The user's first address becomes the default whatever the caller asked
for; asking for default on a later one moves the flag in the same write.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import AddressSpec
from storefront.domain.model.address import Address
from storefront.domain.repository.address_book_repository import AddressBookRepository

logger = structlog.get_logger(__name__)


class AddAddressHandler:

    def __init__(self, address_book_repo: AddressBookRepository) -> None:
        self._address_book_repo = address_book_repo

    def handle(self, user_id: str, details: AddressSpec) -> Address:
        book = self._address_book_repo.ensure_exists(user_id)
        address = book.add_address(
            full_name=details.full_name,
            mobile_number=details.mobile_number,
            email=details.email,
            shipping_address=details.shipping_address,
            pin_code=details.pin_code,
            city=details.city,
            state=details.state,
            landmark=details.landmark,
            country=details.country,
            delivery_instructions=details.delivery_instructions,
            is_default=details.is_default,
        )
        self._address_book_repo.save(book)

        logger.info(
            "Address added",
            user_id=user_id,
            address_id=address.id,
            is_default=address.is_default,
        )
        return address
