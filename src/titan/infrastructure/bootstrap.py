"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from titan.application.cart_engine import CartEngine
from titan.application.checkout import CheckoutHandler
from titan.application.checkout_gateway import CheckoutGateway, LocalCheckoutGateway
from titan.infrastructure.config.settings import Settings, get_settings
from titan.infrastructure.http.checkout_client import HttpCheckoutGateway
from titan.infrastructure.persistence.json_cart_store import JsonCartStore
from titan.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from titan.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def product_repository(settings: Settings | None = None) -> JsonProductRepository:
    settings = settings or get_settings()
    return JsonProductRepository(settings.products_file)


def order_repository(settings: Settings | None = None) -> JsonOrderRepository:
    settings = settings or get_settings()
    return JsonOrderRepository(settings.orders_file)


def cart_store(settings: Settings | None = None) -> JsonCartStore:
    settings = settings or get_settings()
    return JsonCartStore(settings.resolved_cart_file, key=settings.cart_key)


def cart_engine(settings: Settings | None = None) -> CartEngine:
    return CartEngine(cart_store(settings))


def checkout_handler(settings: Settings | None = None) -> CheckoutHandler:
    settings = settings or get_settings()
    return CheckoutHandler(
        order_repo=order_repository(settings),
        product_repo=product_repository(settings),
        lookup_workers=settings.lookup_workers,
    )


def checkout_gateway(settings: Settings | None = None) -> CheckoutGateway:
    """HTTP when an API URL is configured, in-process otherwise."""
    settings = settings or get_settings()
    if settings.api_url:
        return HttpCheckoutGateway(settings.api_url, timeout=settings.request_timeout)
    return LocalCheckoutGateway(checkout_handler(settings))
