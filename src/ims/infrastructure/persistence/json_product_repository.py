"""JSON-file-backed implementation of ProductRepository.

File layout::

    {"next_id": 4, "products": [{"id": 1, "name": "...", "quantity": 0, "price": "9.99"}]}

``next_id`` only ever grows, so a deleted product's ID is never handed
out again.
"""

from __future__ import annotations

import json
import os
import threading
from decimal import Decimal
from pathlib import Path

from ims.domain.exceptions import DuplicateNameError
from ims.domain.model.product import Product, ProductPage
from ims.domain.model.value_objects import Money
from ims.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = threading.Lock()
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        for raw in self._load_raw()["products"]:
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> Product | None:
        for raw in self._load_raw()["products"]:
            if raw["name"] == name:
                return self._to_domain(raw)
        return None

    def search_by_name(self, query: str) -> list[Product]:
        needle = query.casefold()
        return [
            self._to_domain(raw)
            for raw in self._sorted_products()
            if needle in raw["name"].casefold()
        ]

    def list_page(self, page: int, size: int) -> ProductPage:
        records = self._sorted_products()
        start = page * size
        return ProductPage(
            items=[self._to_domain(raw) for raw in records[start:start + size]],
            page=page,
            size=size,
            total=len(records),
        )

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._sorted_products()]

    def save(self, product: Product) -> Product:
        with self._lock:
            data = self._load_raw()
            records = data["products"]

            # Backing uniqueness constraint: the service check alone can race.
            for raw in records:
                if raw["name"] == product.name and raw["id"] != product.id:
                    raise DuplicateNameError(product.name)

            if product.id is None:
                product.id = data["next_id"]
                data["next_id"] += 1

            # Upsert: replace if exists, otherwise append
            replaced = False
            for i, raw in enumerate(records):
                if raw["id"] == product.id:
                    records[i] = self._to_raw(product)
                    replaced = True
                    break
            if not replaced:
                records.append(self._to_raw(product))

            self._persist_raw(data)
        return product

    def delete(self, product: Product) -> None:
        with self._lock:
            data = self._load_raw()
            data["products"] = [
                raw for raw in data["products"] if raw["id"] != product.id
            ]
            self._persist_raw(data)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "quantity": product.quantity,
            "price": str(product.price.amount),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            quantity=raw.get("quantity", 0),
            price=Money(Decimal(raw["price"])),
        )

    # --- File helpers ---------------------------------------------------------

    def _sorted_products(self) -> list[dict]:
        return sorted(self._load_raw()["products"], key=lambda raw: raw["id"])

    def _load_raw(self) -> dict:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, data: dict) -> None:
        tmp_path = self._file_path.with_suffix(self._file_path.suffix + ".tmp")
        try:
            tmp_path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
            os.replace(tmp_path, self._file_path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._persist_raw({"next_id": 1, "products": []})
