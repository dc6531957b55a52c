"""Cart aggregate: the buyer's client-held selection.

The cart owns an ordered list of lines, at most one per product id.
Every mutation goes through the methods below; persistence is a
separate, explicit step owned by the ``CartEngine``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterator

from titan.domain.exceptions import ValidationError
from titan.domain.model.product import Product
from titan.domain.model.value_objects import Money


@dataclass
class CartLine:
    """One product in the cart with the snapshot taken when it was added."""

    product: Product
    quantity: int = 1

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValidationError("Cart line quantity must be at least 1")

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity


@dataclass
class Cart:
    """Aggregate root for the buyer's cart.

    Invariants:
    - one line per product id (adding again merges into the quantity)
    - every line has quantity >= 1 (dropping to zero deletes the line)
    - lines keep insertion order for display
    """

    lines: list[CartLine] = field(default_factory=list)

    # --- Mutations ------------------------------------------------------------

    def add(self, product: Product) -> CartLine:
        """Add one unit, merging into an existing line for the same id.

        The snapshot is copied so later edits to *product* do not leak in.
        An existing line keeps its original snapshot.
        """
        line = self.line_for(product.id)
        if line is not None:
            line.quantity += 1
            return line

        line = CartLine(product=replace(product), quantity=1)
        self.lines.append(line)
        return line

    def remove(self, product_id: str) -> bool:
        """Delete the line for *product_id*. Returns False if it was absent."""
        before = len(self.lines)
        self.lines = [line for line in self.lines if line.product_id != product_id]
        return len(self.lines) != before

    def change_quantity(self, product_id: str, delta: int) -> CartLine | None:
        """Adjust a line by *delta*; a result <= 0 removes the line.

        Returns the updated line, or None when the line was removed or
        never existed.
        """
        line = self.line_for(product_id)
        if line is None:
            return None

        new_quantity = line.quantity + delta
        if new_quantity <= 0:
            self.remove(product_id)
            return None

        line.quantity = new_quantity
        return line

    def clear(self) -> None:
        self.lines = []

    # --- Queries --------------------------------------------------------------

    def line_for(self, product_id: str) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    @property
    def total(self) -> Money:
        """Exact sum of price x quantity. Not rounded."""
        result = Money.zero()
        for line in self.lines:
            result = result + line.line_total
        return result

    @property
    def count(self) -> int:
        return sum(line.quantity for line in self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def __iter__(self) -> Iterator[CartLine]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)
