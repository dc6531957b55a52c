"""JSON-file-backed implementation of OrderRepository (append-only)."""

from __future__ import annotations

import json
import threading
import uuid
from datetime import datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

from titan.domain.exceptions import DomainException, PersistenceError
from titan.domain.model.order import Customer, Order, OrderLineItem, OrderStatus
from titan.domain.model.value_objects import Money, Quantity
from titan.domain.repository.order_repository import OrderRepository
from titan.infrastructure.persistence.json_file import write_json_atomic


class JsonOrderRepository(OrderRepository):
    """Orders file shared by concurrent checkouts.

    Appends are serialized by a lock and the file is swapped in whole, so
    every acknowledged order is on disk and readers never see a partial
    document.
    """

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = threading.Lock()
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> str:
        return uuid.uuid4().hex

    def get_by_id(self, order_id: str) -> Order | None:
        for raw in self._load_raw():
            if isinstance(raw, dict) and raw.get("id") == order_id:
                return self._to_domain(raw)
        return None

    def add(self, order: Order) -> None:
        order_id = order.id or self.next_id()
        with self._lock:
            orders = self._load_raw()
            orders.append(self._to_raw(order, order_id))
            self._persist_raw(orders)
        # Only visible to the caller once the write succeeded
        order.id = order_id

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order, order_id: str) -> dict:
        return {
            "id": order_id,
            "customer": {
                "name": order.customer.name,
                "email": order.customer.email,
                "address": order.customer.address,
            },
            "items": [
                {
                    "productId": item.product_id,
                    "name": item.product_name,
                    "price": str(item.unit_price.amount),
                    "image": item.image,
                    "quantity": item.quantity.value,
                }
                for item in order.items
            ],
            "total": str(order.total.amount),
            "status": order.status.value,
            "createdAt": order.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict[str, Any]) -> Order:
        try:
            customer = raw["customer"]
            items = [
                OrderLineItem(
                    product_id=i["productId"],
                    product_name=i["name"],
                    quantity=Quantity(i["quantity"]),
                    unit_price=Money(Decimal(str(i["price"]))),
                    image=i.get("image", ""),
                )
                for i in raw["items"]
            ]
            return Order(
                id=raw["id"],
                customer=Customer(
                    name=customer["name"],
                    email=customer["email"],
                    address=customer.get("address", ""),
                ),
                items=items,
                status=OrderStatus(raw["status"]),
                created_at=datetime.fromisoformat(raw["createdAt"]),
            )
        except (
            KeyError, TypeError, AttributeError, ValueError, InvalidOperation, DomainException,
        ) as exc:
            raise PersistenceError(f"Order record {raw.get('id')!r} is unreadable: {exc}") from exc

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            orders = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise PersistenceError(f"Order store unavailable: {exc}") from exc
        if not isinstance(orders, list):
            raise PersistenceError(
                f"Order store unavailable: expected a list, got {type(orders).__name__}"
            )
        return orders

    def _persist_raw(self, orders: list[dict]) -> None:
        try:
            write_json_atomic(self._file_path, orders)
        except OSError as exc:
            raise PersistenceError(f"Order could not be saved: {exc}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
