"""Abstract repository for the catalog's products.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in
the infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import CatalogProduct


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> CatalogProduct | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> CatalogProduct | None:
        """Return a product by its exact name (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[CatalogProduct]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: CatalogProduct) -> None:
        """Persist a new or updated product."""
