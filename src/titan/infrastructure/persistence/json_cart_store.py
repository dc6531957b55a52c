"""JSON-file-backed key/value implementation of CartStore.

The file is a small key/value document; one key holds the whole cart as
an ordered array of ``{productId, ...product fields, quantity}``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import structlog

from titan.domain.exceptions import CartPersistenceError, DomainException
from titan.domain.model.cart import Cart, CartLine
from titan.domain.repository.cart_store import CartStore
from titan.infrastructure.persistence.json_file import write_json_atomic
from titan.infrastructure.persistence.product_mapper import (
    product_from_raw,
    product_to_raw,
)

logger = structlog.get_logger(__name__)

DEFAULT_CART_KEY = "titan_cart"


class JsonCartStore(CartStore):

    def __init__(self, file_path: Path, key: str = DEFAULT_CART_KEY) -> None:
        self._file_path = file_path
        self._key = key

    # --- CartStore interface --------------------------------------------------

    def load(self) -> Cart:
        if not self._file_path.exists():
            return Cart()
        try:
            document = json.loads(self._file_path.read_text(encoding="utf-8"))
            records = document.get(self._key) or []
            return self._to_domain(records)
        except (
            OSError, ValueError, TypeError, AttributeError, KeyError, ArithmeticError,
            DomainException,
        ) as exc:
            logger.warning("cart_restore_failed", path=str(self._file_path), error=str(exc))
            return Cart()

    def save(self, cart: Cart) -> None:
        document = self._read_document()
        document[self._key] = self._to_raw(cart)
        try:
            write_json_atomic(self._file_path, document)
        except OSError as exc:
            raise CartPersistenceError(f"Cart could not be saved: {exc}") from exc

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart) -> list[dict[str, Any]]:
        return [
            {**product_to_raw(line.product, id_key="productId"), "quantity": line.quantity}
            for line in cart
        ]

    @staticmethod
    def _to_domain(records: list[dict[str, Any]]) -> Cart:
        cart = Cart()
        for raw in records:
            product = product_from_raw(raw, id_key="productId")
            quantity = int(raw.get("quantity") or 1)
            existing = cart.line_for(product.id)
            if existing is not None:
                # Older files may hold duplicates; fold them back into one line
                existing.quantity += quantity
            else:
                cart.lines.append(CartLine(product=product, quantity=quantity))
        return cart

    # --- File helpers ---------------------------------------------------------

    def _read_document(self) -> dict[str, Any]:
        """Other keys in the file are preserved; a corrupt file is replaced."""
        try:
            document = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return {}
        return document if isinstance(document, dict) else {}
