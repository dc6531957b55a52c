"""HTTP implementation of CheckoutGateway (httpx).

No retries: on a transport timeout the order may or may not have been
stored, so the caller decides what to do (see ``CheckoutTimeoutError``).
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

import httpx
import structlog

from titan.application.checkout_gateway import CheckoutGateway
from titan.application.dto import CheckoutReceipt, CheckoutRequest
from titan.domain.exceptions import (
    PersistenceError,
    UnknownProductError,
    ValidationError,
)

logger = structlog.get_logger(__name__)


class CheckoutTimeoutError(PersistenceError):
    """The request timed out; the order's existence is unknown."""


class HttpCheckoutGateway(CheckoutGateway):

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def submit(self, request: CheckoutRequest) -> CheckoutReceipt:
        url = f"{self.base_url}/api/checkout"
        try:
            with httpx.Client(transport=self._transport, timeout=self._timeout) as client:
                response = client.post(url, json=self._to_payload(request))
        except httpx.TimeoutException as exc:
            logger.error("checkout_timeout", url=url)
            raise CheckoutTimeoutError(
                "Checkout timed out; check your orders before retrying"
            ) from exc
        except httpx.HTTPError as exc:
            logger.error("checkout_transport_failed", url=url, error=str(exc))
            raise PersistenceError("Checkout failed. Please try again.") from exc

        body = self._json(response)
        if response.status_code == 201:
            return CheckoutReceipt(
                order_id=str(body["orderId"]),
                total=Decimal(str(body["total"])),
                message=body.get("message", "Order placed successfully"),
            )

        error = body.get("error") or f"Checkout failed with status {response.status_code}"
        if response.status_code == 400:
            if body.get("productId"):
                raise UnknownProductError(str(body["productId"]))
            raise ValidationError(error)
        raise PersistenceError(error)

    # --- Helpers --------------------------------------------------------------

    @staticmethod
    def _to_payload(request: CheckoutRequest) -> dict[str, Any]:
        customer = request.customer
        return {
            "customer": {
                "name": customer.name if customer else None,
                "email": customer.email if customer else None,
                "address": customer.address if customer else None,
            },
            "items": [
                {"productId": item.product_id, "quantity": item.quantity}
                for item in request.items
            ],
            "total": float(request.claimed_total) if request.claimed_total is not None else None,
        }

    @staticmethod
    def _json(response: httpx.Response) -> dict[str, Any]:
        try:
            body = response.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}
