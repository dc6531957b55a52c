"""Pydantic request/response schemas for the storefront API.

These are external contracts, separate from the application DTOs.
The checkout request is lenient: missing or malformed
fields reach the checkout handler, which reports them as validation
errors, and quantities are passed through raw for normalization.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Checkout
# ---------------------------------------------------------------------------
class CustomerSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    email: str | None = None
    address: str | None = None


class CheckoutItemSchema(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    product_id: str = Field(validation_alias=AliasChoices("productId", "_id", "id"))
    quantity: Any = 1


class CheckoutRequestSchema(BaseModel):
    customer: CustomerSchema | None = None
    items: list[CheckoutItemSchema] = Field(default_factory=list)
    total: Any = None

    model_config = {
        "extra": "ignore",
        "json_schema_extra": {
            "examples": [
                {
                    "customer": {"name": "Ada", "email": "ada@example.com", "address": ""},
                    "items": [{"productId": "p1", "quantity": 2}],
                    "total": 20.0,
                }
            ]
        },
    }


class CheckoutResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    order_id: str = Field(alias="orderId")
    total: float
    message: str


class ErrorResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    error: str
    product_id: str | None = Field(default=None, alias="productId")


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------
class ProductResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    price: float
    image: str
    category: str
    description: str
    rating: float
    review_count: int = Field(alias="reviewCount")
    badge: str | None = None


class CategoryResponse(BaseModel):
    category: str
    count: int


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class OrderCustomerResponse(BaseModel):
    name: str
    email: str
    address: str


class OrderItemResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(alias="productId")
    name: str
    price: float
    quantity: int
    image: str


class OrderResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    customer: OrderCustomerResponse
    items: list[OrderItemResponse]
    total: float
    status: str
    created_at: str = Field(alias="createdAt")
