"""Domain service: Catalog Lookup.

Carts and wishlists hold weak references to catalog products. A
reference may stop resolving at any time (the product was deleted), so
lookups return a tagged result instead of a nullable product, and the
"must exist and be active" rule used by every add operation lives here
once.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import EntityNotFoundError, ProductUnavailableError
from storefront.domain.model.product import CatalogProduct
from storefront.domain.repository.product_repository import ProductRepository


@dataclass(frozen=True)
class Resolved:
    product: CatalogProduct

    @property
    def is_actionable(self) -> bool:
        return self.product.is_active


@dataclass(frozen=True)
class Absent:
    product_id: str

    @property
    def is_actionable(self) -> bool:
        return False


ProductLookup = Resolved | Absent


class CatalogLookupService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def resolve(self, product_id: str) -> ProductLookup:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            return Absent(product_id)
        return Resolved(product)

    def resolve_many(self, product_ids: list[str]) -> dict[str, ProductLookup]:
        return {pid: self.resolve(pid) for pid in dict.fromkeys(product_ids)}

    def require_existing(self, product_id: str) -> CatalogProduct:
        """Return the product whatever its status; raise if it does not resolve."""
        lookup = self.resolve(product_id)
        if isinstance(lookup, Absent):
            raise EntityNotFoundError(f"Product '{product_id}' not found")
        return lookup.product

    def require_active(self, product_id: str) -> CatalogProduct:
        """Return the product if it exists and can be added to a cart or wishlist."""
        product = self.require_existing(product_id)
        if not product.is_active:
            raise ProductUnavailableError(f"Product '{product.name}' is not available")
        return product
