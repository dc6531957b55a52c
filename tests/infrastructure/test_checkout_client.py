"""Tests for the httpx checkout gateway, against a mock transport."""

import json
from decimal import Decimal

import httpx
import pytest

from titan.application.dto import CheckoutItemSpec, CheckoutRequest, CustomerSpec
from titan.domain.exceptions import (
    PersistenceError,
    UnknownProductError,
    ValidationError,
)
from titan.infrastructure.http.checkout_client import CheckoutTimeoutError, HttpCheckoutGateway

REQUEST = CheckoutRequest(
    customer=CustomerSpec(name="Ada", email="ada@example.com"),
    items=[CheckoutItemSpec("p1", 2)],
    claimed_total=Decimal("20.00"),
)


def _gateway(handler) -> HttpCheckoutGateway:
    return HttpCheckoutGateway("http://shop.test/", transport=httpx.MockTransport(handler))


class TestHttpCheckoutGateway:

    def test_success(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["url"] = str(request.url)
            captured["body"] = json.loads(request.content)
            return httpx.Response(201, json={"orderId": "abc", "total": 20.0, "message": "ok"})

        receipt = _gateway(handler).submit(REQUEST)

        assert receipt.order_id == "abc"
        assert receipt.total == Decimal("20.0")
        assert captured["url"] == "http://shop.test/api/checkout"
        assert captured["body"]["items"] == [{"productId": "p1", "quantity": 2}]
        assert captured["body"]["customer"]["email"] == "ada@example.com"
        assert captured["body"]["total"] == 20.0

    def test_validation_error(self):
        gateway = _gateway(lambda r: httpx.Response(400, json={"error": "Invalid order payload"}))
        with pytest.raises(ValidationError, match="Invalid order payload"):
            gateway.submit(REQUEST)

    def test_unknown_product(self):
        gateway = _gateway(lambda r: httpx.Response(
            400, json={"error": "Product not found: p1", "productId": "p1"}
        ))
        with pytest.raises(UnknownProductError) as exc_info:
            gateway.submit(REQUEST)
        assert exc_info.value.product_id == "p1"

    def test_server_error(self):
        gateway = _gateway(lambda r: httpx.Response(500, json={"error": "Checkout failed. Please try again."}))
        with pytest.raises(PersistenceError, match="Checkout failed"):
            gateway.submit(REQUEST)

    def test_non_json_error_body(self):
        gateway = _gateway(lambda r: httpx.Response(502, text="Bad Gateway"))
        with pytest.raises(PersistenceError, match="502"):
            gateway.submit(REQUEST)

    def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        with pytest.raises(CheckoutTimeoutError):
            _gateway(handler).submit(REQUEST)

    def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(PersistenceError):
            _gateway(handler).submit(REQUEST)
