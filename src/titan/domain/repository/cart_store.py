"""Abstract durable storage for the buyer's cart."""

from __future__ import annotations

from abc import ABC, abstractmethod

from titan.domain.model.cart import Cart


class CartStore(ABC):

    @abstractmethod
    def load(self) -> Cart:
        """Return the persisted cart.

        Missing or malformed data must come back as an empty cart,
        never as an exception.
        """

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Write the whole cart. Raises CartPersistenceError on failure."""
