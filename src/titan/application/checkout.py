"""Application service: Checkout use case (server side).

Orchestrates the verification domain service and the order record:
validate input, re-price every line against the catalog, then persist
the order exactly once. Nothing is written unless every line verifies.
"""

from __future__ import annotations

import structlog

from titan.application.dto import CheckoutReceipt, CheckoutRequest
from titan.domain.exceptions import (
    PersistenceError,
    UnknownProductError,
    ValidationError,
)
from titan.domain.model.order import Customer, Order
from titan.domain.repository.order_repository import OrderRepository
from titan.domain.repository.product_repository import ProductRepository
from titan.domain.service.checkout_verification_service import (
    CheckoutVerificationService,
    ClaimedLine,
)

logger = structlog.get_logger(__name__)


class CheckoutHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        lookup_workers: int = 4,
    ) -> None:
        self._order_repo = order_repo
        self._verifier = CheckoutVerificationService(product_repo, lookup_workers)

    def handle(self, request: CheckoutRequest) -> CheckoutReceipt:
        """Place a verified order.

        Steps:
        1. Reject empty carts and missing customer fields (no lookups yet).
        2. Re-price every line from the catalog; any unknown id aborts.
        3. Build the order from catalog data and persist it once.

        Each call creates a new order; duplicate submissions are not
        detected here.
        """
        if request.customer is None or not request.items:
            raise ValidationError("Invalid order payload")

        spec = request.customer
        customer = Customer.create(spec.name, spec.email, spec.address)

        claimed = [ClaimedLine(item.product_id, item.quantity) for item in request.items]
        try:
            line_items = self._verifier.verify(claimed)
        except UnknownProductError as exc:
            logger.warning("checkout_rejected", reason="unknown_product", product_id=exc.product_id)
            raise

        order = Order.create(customer=customer, items=line_items)

        try:
            self._order_repo.add(order)
        except PersistenceError:
            logger.error("checkout_persist_failed", lines=len(line_items))
            raise

        if request.claimed_total is not None:
            logger.debug(
                "checkout_client_total_ignored",
                claimed_total=str(request.claimed_total),
                total=str(order.total.amount),
            )
        logger.info(
            "checkout_accepted",
            order_id=order.id,
            total=str(order.total.amount),
            lines=len(order.items),
        )
        return CheckoutReceipt(order_id=order.id, total=order.total.amount)  # type: ignore[arg-type]
