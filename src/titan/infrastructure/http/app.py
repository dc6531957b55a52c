"""Storefront FastAPI application.

Serves the catalog, accepts checkouts and returns placed orders. Domain
errors are mapped to ``{"error": ...}`` bodies here, in one place.

Usage:
    titan serve
    uvicorn titan.infrastructure.http.app:create_app --factory
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from titan.application.checkout import CheckoutHandler
from titan.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    PersistenceError,
    UnknownProductError,
    ValidationError,
)
from titan.domain.repository.order_repository import OrderRepository
from titan.domain.repository.product_repository import ProductRepository
from titan.infrastructure import bootstrap
from titan.infrastructure.config.settings import Settings, get_settings
from titan.infrastructure.http.routes import catalog_router, order_router
from titan.infrastructure.observability.log_config import configure_logging

logger = structlog.get_logger(__name__)

CHECKOUT_FAILED = "Checkout failed. Please try again."
STORE_UNAVAILABLE = "Service temporarily unavailable. Please try again."


def _error(status_code: int, message: str, **extra: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, **extra})


def create_app(
    settings: Settings | None = None,
    product_repo: ProductRepository | None = None,
    order_repo: OrderRepository | None = None,
) -> FastAPI:
    """Build the app; repositories default to the configured JSON files."""
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.log_format)

    product_repo = product_repo or bootstrap.product_repository(settings)
    order_repo = order_repo or bootstrap.order_repository(settings)

    app = FastAPI(
        title="TITAN Storefront API",
        description="Catalog browsing and price-verified checkout",
    )
    app.state.product_repo = product_repo
    app.state.order_repo = order_repo
    app.state.checkout_handler = CheckoutHandler(
        order_repo=order_repo,
        product_repo=product_repo,
        lookup_workers=settings.lookup_workers,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -----------------------------------------------------------------------
    # Error mapping
    # -----------------------------------------------------------------------
    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError):
        logger.info("request_rejected", path=request.url.path, errors=len(exc.errors()))
        return _error(400, "Invalid order payload")

    @app.exception_handler(UnknownProductError)
    async def unknown_product(request: Request, exc: UnknownProductError):
        return _error(400, str(exc), productId=exc.product_id)

    @app.exception_handler(EntityNotFoundError)
    async def not_found(request: Request, exc: EntityNotFoundError):
        return _error(404, str(exc))

    @app.exception_handler(ValidationError)
    async def validation_error(request: Request, exc: ValidationError):
        return _error(400, str(exc))

    @app.exception_handler(PersistenceError)
    async def persistence_error(request: Request, exc: PersistenceError):
        logger.error("store_unavailable", path=request.url.path, error=str(exc))
        message = CHECKOUT_FAILED if request.url.path.endswith("/checkout") else STORE_UNAVAILABLE
        return _error(500, message)

    @app.exception_handler(DomainException)
    async def domain_error(request: Request, exc: DomainException):
        return _error(400, str(exc))

    # -----------------------------------------------------------------------
    # Routers
    # -----------------------------------------------------------------------
    app.include_router(catalog_router)
    app.include_router(order_router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app
