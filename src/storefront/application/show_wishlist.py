"""Application service: Show Wishlist use case (query).

Same soft-hide rule as the cart view: entries for deleted or inactive
products are not shown but are kept.
"""

from __future__ import annotations

from storefront.application.dto import WishlistDTO, WishlistItemDTO
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.wishlist_repository import WishlistRepository
from storefront.domain.service.catalog_lookup import CatalogLookupService, Resolved


class ShowWishlistHandler:

    def __init__(
        self,
        wishlist_repo: WishlistRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._wishlist_repo = wishlist_repo
        self._catalog = CatalogLookupService(product_repo)

    def handle(self, user_id: str) -> WishlistDTO:
        wishlist = self._wishlist_repo.ensure_exists(user_id)
        lookups = self._catalog.resolve_many([item.product_id for item in wishlist.items])

        items: list[WishlistItemDTO] = []
        for item in wishlist.items:
            lookup = lookups[item.product_id]
            if not (isinstance(lookup, Resolved) and lookup.is_actionable):
                continue
            product = lookup.product
            items.append(
                WishlistItemDTO(
                    product_id=item.product_id,
                    product_name=product.name,
                    image=product.image,
                    current_price=str(product.selling_price),
                    stock_available=product.stock_available,
                    added_at=item.added_at.strftime("%Y-%m-%d %H:%M UTC"),
                )
            )

        return WishlistDTO(owner_id=wishlist.owner_id, items=items, count=len(items))
