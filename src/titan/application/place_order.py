"""Application service: Place Order use case (buyer side).

Sends the current cart to the checkout verifier and clears the cart
only after the verifier reports success. Any failure leaves the cart
untouched so the buyer can fix the problem and retry.
"""

from __future__ import annotations

import structlog

from titan.application.cart_engine import CartEngine
from titan.application.checkout_gateway import CheckoutGateway
from titan.application.dto import (
    CheckoutItemSpec,
    CheckoutReceipt,
    CheckoutRequest,
    CustomerSpec,
)
from titan.domain.exceptions import CartPersistenceError, ValidationError

logger = structlog.get_logger(__name__)


class PlaceOrderHandler:

    def __init__(self, engine: CartEngine, gateway: CheckoutGateway) -> None:
        self._engine = engine
        self._gateway = gateway
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    def handle(self, customer: CustomerSpec) -> CheckoutReceipt:
        """Submit the cart once; refuse a second submit while one is pending.

        The verifier does not deduplicate, so this guard is the only
        protection against double-submits from the same session.
        """
        if self._in_flight:
            raise ValidationError("Checkout already in progress")

        cart = self._engine.cart
        request = CheckoutRequest(
            customer=customer,
            items=[CheckoutItemSpec(line.product_id, line.quantity) for line in cart],
            claimed_total=cart.total.amount,
        )

        self._in_flight = True
        try:
            receipt = self._gateway.submit(request)
        finally:
            self._in_flight = False

        try:
            self._engine.clear()
        except CartPersistenceError:
            # The order exists; only the stored cart is stale.
            logger.warning("cart_clear_not_persisted", order_id=receipt.order_id)

        return receipt
