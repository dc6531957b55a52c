"""FastAPI routes for catalog browsing, checkout and order lookup."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from titan.application.browse_catalog import (
    ListCategoriesHandler,
    ListProductsHandler,
    ShowProductHandler,
)
from titan.application.checkout import CheckoutHandler
from titan.application.dto import (
    CheckoutItemSpec,
    CheckoutRequest,
    CustomerSpec,
    OrderDTO,
    ProductDTO,
)
from titan.application.show_order import ShowOrderHandler
from titan.domain.repository.order_repository import OrderRepository
from titan.domain.repository.product_repository import ProductRepository
from titan.infrastructure.http.schemas import (
    CategoryResponse,
    CheckoutRequestSchema,
    CheckoutResponse,
    ErrorResponse,
    OrderCustomerResponse,
    OrderItemResponse,
    OrderResponse,
    ProductResponse,
)


# ---------------------------------------------------------------------------
# Dependencies (wired onto app.state by create_app)
# ---------------------------------------------------------------------------
def product_repo(request: Request) -> ProductRepository:
    return request.app.state.product_repo


def order_repo(request: Request) -> OrderRepository:
    return request.app.state.order_repo


def checkout_handler(request: Request) -> CheckoutHandler:
    return request.app.state.checkout_handler


# ---------------------------------------------------------------------------
# Mapping
# ---------------------------------------------------------------------------
def _product_response(dto: ProductDTO) -> ProductResponse:
    return ProductResponse(
        id=dto.id,
        name=dto.name,
        price=float(dto.price),
        image=dto.image,
        category=dto.category,
        description=dto.description,
        rating=dto.rating,
        review_count=dto.review_count,
        badge=dto.badge,
    )


def _order_response(dto: OrderDTO) -> OrderResponse:
    return OrderResponse(
        id=dto.id,
        customer=OrderCustomerResponse(
            name=dto.customer_name,
            email=dto.customer_email,
            address=dto.customer_address,
        ),
        items=[
            OrderItemResponse(
                product_id=item.product_id,
                name=item.product_name,
                price=float(item.unit_price),
                quantity=item.quantity,
                image=item.image,
            )
            for item in dto.items
        ],
        total=float(dto.total),
        status=dto.status,
        created_at=dto.created_at,
    )


# ---------------------------------------------------------------------------
# Catalog Router
# ---------------------------------------------------------------------------
catalog_router = APIRouter(prefix="/api", tags=["catalog"])


@catalog_router.get("/products", response_model=list[ProductResponse])
def list_products(
    category: str | None = None,
    search: str | None = None,
    sort: str | None = None,
    repo: ProductRepository = Depends(product_repo),
) -> list[ProductResponse]:
    products = ListProductsHandler(repo).handle(category=category, search=search, sort=sort)
    return [_product_response(p) for p in products]


@catalog_router.get(
    "/products/{product_id}",
    response_model=ProductResponse,
    responses={404: {"model": ErrorResponse}},
)
def show_product(
    product_id: str,
    repo: ProductRepository = Depends(product_repo),
) -> ProductResponse:
    return _product_response(ShowProductHandler(repo).handle(product_id))


@catalog_router.get("/categories", response_model=list[CategoryResponse])
def list_categories(
    repo: ProductRepository = Depends(product_repo),
) -> list[CategoryResponse]:
    return [
        CategoryResponse(category=c.category, count=c.count)
        for c in ListCategoriesHandler(repo).handle()
    ]


# ---------------------------------------------------------------------------
# Checkout / Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/api", tags=["orders"])


@order_router.post(
    "/checkout",
    status_code=201,
    response_model=CheckoutResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def checkout(
    body: CheckoutRequestSchema,
    handler: CheckoutHandler = Depends(checkout_handler),
) -> CheckoutResponse:
    customer = (
        CustomerSpec(
            name=body.customer.name,
            email=body.customer.email,
            address=body.customer.address,
        )
        if body.customer is not None
        else None
    )
    receipt = handler.handle(
        CheckoutRequest(
            customer=customer,
            items=[CheckoutItemSpec(i.product_id, i.quantity) for i in body.items],
            claimed_total=body.total,
        )
    )
    return CheckoutResponse(
        order_id=receipt.order_id,
        total=float(receipt.total),
        message=receipt.message,
    )


@order_router.get(
    "/orders/{order_id}",
    response_model=OrderResponse,
    responses={404: {"model": ErrorResponse}},
)
def show_order(
    order_id: str,
    repo: OrderRepository = Depends(order_repo),
) -> OrderResponse:
    return _order_response(ShowOrderHandler(repo).handle(order_id))
