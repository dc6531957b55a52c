"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
import threading
from pathlib import Path

from titan.domain.exceptions import DomainException, PersistenceError
from titan.domain.model.product import Product
from titan.domain.repository.product_repository import ProductRepository
from titan.infrastructure.persistence.json_file import write_json_atomic
from titan.infrastructure.persistence.product_mapper import (
    product_from_raw,
    product_to_raw,
)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = threading.Lock()
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        with self._lock:
            products = self._load()
            products[product.id] = product
            self._persist(products.values())

    def replace_all(self, products: list[Product]) -> None:
        with self._lock:
            self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            products = [product_from_raw(item) for item in raw]
        except (OSError, ValueError, TypeError, DomainException) as exc:
            raise PersistenceError(f"Catalog unavailable: {exc}") from exc
        return {p.id: p for p in products}

    def _persist(self, products) -> None:
        raw = [product_to_raw(p) for p in products]
        try:
            write_json_atomic(self._file_path, raw)
        except OSError as exc:
            raise PersistenceError(f"Catalog could not be written: {exc}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
