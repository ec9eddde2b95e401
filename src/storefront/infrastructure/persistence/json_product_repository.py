"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from storefront.domain.model.product import DEFAULT_STOCK, Category, Product
from storefront.domain.model.value_objects import CURRENCY, Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> str:
        ids = [int(raw["id"]) for raw in self._file.load() if str(raw["id"]).isdigit()]
        return str(max(ids) + 1) if ids else "1"

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._file.load():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> Product | None:
        for raw in self._file.load():
            if raw["name"].lower() == name.lower():
                return self._to_domain(raw)
        return None

    def list_all(self, category: Category | None = None) -> list[Product]:
        products = [self._to_domain(raw) for raw in self._file.load()]
        if category is not None:
            products = [p for p in products if p.category == category]
        return products

    def save(self, product: Product) -> None:
        with self._file.lock:
            records = self._file.load()
            for i, raw in enumerate(records):
                if raw["id"] == product.id:
                    records[i] = self._to_raw(product)
                    break
            else:
                records.append(self._to_raw(product))
            self._file.persist(records)

    def delete(self, product_id: str) -> bool:
        with self._file.lock:
            records = self._file.load()
            remaining = [raw for raw in records if raw["id"] != product_id]
            if len(remaining) == len(records):
                return False
            self._file.persist(remaining)
            return True

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "category": product.category.value,
            "description": product.description,
            "image": product.image,
            "stock": product.stock,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            price=Money(Decimal(raw["price"]), raw.get("currency", CURRENCY)),
            category=Category(raw["category"]),
            description=raw.get("description", ""),
            image=raw.get("image", ""),
            stock=raw.get("stock", DEFAULT_STOCK),
        )
