"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI and HTTP layers can catch them uniformly and turn them into
user-friendly messages or status codes.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated (bad input)."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class UnknownProductError(EntityNotFoundError):
    """A checkout line references a product missing from the catalog."""

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product not found: {product_id}")
        self.product_id = product_id


class PersistenceError(DomainException):
    """A backing store (catalog, orders, cart) could not be read or written."""


class CartPersistenceError(PersistenceError):
    """The cart changed in memory but could not be written to its store.

    Only durability is lost; the in-memory cart is still correct for the
    current session and the write can be retried.
    """
