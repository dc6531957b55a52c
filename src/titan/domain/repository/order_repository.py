"""Abstract repository for the Order aggregate (append-only order record)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from titan.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate a new opaque order ID."""

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def add(self, order: Order) -> None:
        """Persist a new order, assigning its ID.

        Orders are immutable once stored; there is no update.
        """
