"""Shared builders for test data."""

from __future__ import annotations

from titan.domain.model.product import Product
from titan.domain.model.value_objects import Money


def make_product(
    product_id: str = "p1",
    name: str = "Widget",
    price: str = "10.00",
    category: str = "gadgets",
    description: str = "",
    rating: float = 4.0,
    image: str = "",
) -> Product:
    return Product(
        id=product_id,
        name=name,
        price=Money.of(price),
        image=image or f"https://img.example/{product_id}.jpg",
        category=category,
        description=description,
        rating=rating,
        review_count=10,
    )
