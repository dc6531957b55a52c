"""Application service: Cart Engine.

Single-owner state container for the buyer's cart. Each operation
mutates the ``Cart`` aggregate, writes it through to the ``CartStore``
and then notifies observers (badge / drawer re-render).

Mutations must not interleave: callers dispatch one user action at a
time and each call returns only after the write has been attempted.
"""

from __future__ import annotations

from typing import Any, Callable

import structlog

from titan.domain.exceptions import CartPersistenceError
from titan.domain.model.cart import Cart
from titan.domain.model.product import Product
from titan.domain.model.value_objects import Money
from titan.domain.repository.cart_store import CartStore

logger = structlog.get_logger(__name__)

CartObserver = Callable[[Cart], None]


class CartEngine:

    def __init__(self, store: CartStore) -> None:
        self._store = store
        self._cart = store.load()
        self._observers: list[CartObserver] = []
        self._dirty = False

    # --- Observers ------------------------------------------------------------

    def subscribe(self, observer: CartObserver) -> Callable[[], None]:
        """Register *observer*; returns a function that unregisters it."""
        self._observers.append(observer)
        return lambda: self._observers.remove(observer)

    # --- Mutations ------------------------------------------------------------

    def add(self, product: Product) -> Cart:
        """Add one unit of *product* using the given (possibly stale) snapshot."""
        self._cart.add(product)
        return self._commit()

    def remove(self, product_id: str) -> Cart:
        if not self._cart.remove(product_id):
            return self._cart
        return self._commit()

    def change_quantity(self, product_id: str, delta: int) -> Cart:
        """Adjust a line's quantity; reaching zero or below removes it."""
        if self._cart.line_for(product_id) is None:
            return self._cart
        self._cart.change_quantity(product_id, delta)
        return self._commit()

    def clear(self) -> Cart:
        self._cart.clear()
        return self._commit()

    def flush(self) -> None:
        """Retry writing the current cart after a failed persist."""
        self._store.save(self._cart)
        self._dirty = False

    # --- Queries --------------------------------------------------------------

    @property
    def cart(self) -> Cart:
        return self._cart

    @property
    def is_dirty(self) -> bool:
        """True when the last write failed and the store is behind memory."""
        return self._dirty

    def total(self) -> Money:
        return self._cart.total

    def count(self) -> int:
        return self._cart.count

    def snapshot(self) -> list[dict[str, Any]]:
        """Cart lines in checkout-request shape: ``{productId, quantity}``."""
        return [
            {"productId": line.product_id, "quantity": line.quantity}
            for line in self._cart
        ]

    # --- Internal helpers -----------------------------------------------------

    def _commit(self) -> Cart:
        """Write through, notify, and report a failed write to the caller."""
        error: CartPersistenceError | None = None
        try:
            self._store.save(self._cart)
            self._dirty = False
        except CartPersistenceError as exc:
            self._dirty = True
            error = exc
            logger.warning("cart_persist_failed", error=str(exc), lines=len(self._cart))

        for observer in list(self._observers):
            observer(self._cart)

        if error is not None:
            raise error
        return self._cart
