"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from storefront.domain.model.product import CatalogProduct, ProductStatus
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.json_document_store import JsonDocumentStore


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._store = JsonDocumentStore(file_path, key_field="id")

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> CatalogProduct | None:
        raw = self._store.find(product_id)
        return self._to_domain(raw) if raw is not None else None

    def get_by_name(self, name: str) -> CatalogProduct | None:
        for product in self.list_all():
            if product.name.lower() == name.lower():
                return product
        return None

    def list_all(self) -> list[CatalogProduct]:
        return [self._to_domain(raw) for raw in self._store.all()]

    def save(self, product: CatalogProduct) -> None:
        self._store.upsert(self._to_raw(product))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: CatalogProduct) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "selling_price": str(product.selling_price.amount),
            "currency": product.selling_price.currency,
            "stock_available": product.stock_available,
            "status": product.status.value,
            "image": product.image,
        }

    @staticmethod
    def _to_domain(raw: dict) -> CatalogProduct:
        return CatalogProduct(
            id=raw["id"],
            name=raw["name"],
            selling_price=Money(
                Decimal(raw["selling_price"]), raw.get("currency", DEFAULT_CURRENCY)
            ),
            stock_available=raw.get("stock_available", 0),
            status=ProductStatus(raw.get("status", ProductStatus.ACTIVE.value)),
            image=raw.get("image"),
        )
