"""Raw JSON record <-> Product.

Shared by the catalog file, the cart file and the seed loader. Prices
are written as strings so Decimal values survive the round trip; numbers
are accepted on read.
"""

from __future__ import annotations

from typing import Any

from titan.domain.exceptions import ValidationError
from titan.domain.model.product import Product
from titan.domain.model.value_objects import Money


def product_to_raw(product: Product, id_key: str = "id") -> dict[str, Any]:
    return {
        id_key: product.id,
        "name": product.name,
        "price": str(product.price.amount),
        "image": product.image,
        "category": product.category,
        "description": product.description,
        "rating": product.rating,
        "reviewCount": product.review_count,
        "badge": product.badge,
    }


def product_from_raw(raw: dict[str, Any], id_key: str = "id") -> Product:
    """Build a Product from a JSON record.

    Raises ValidationError when required fields are missing or invalid.
    """
    if not isinstance(raw, dict):
        raise ValidationError(f"Product record must be an object, got {type(raw).__name__}")

    product_id = raw.get(id_key, raw.get("_id"))
    if product_id is None or "name" not in raw or "price" not in raw:
        raise ValidationError(f"Product record is missing id, name or price: {raw!r}")

    try:
        return Product(
            id=str(product_id),
            name=str(raw["name"]),
            price=Money.of(raw["price"]),
            image=raw.get("image") or "",
            category=raw.get("category") or "",
            description=raw.get("description") or "",
            rating=float(raw.get("rating") or 0.0),
            review_count=int(raw.get("reviewCount", raw.get("reviews")) or 0),
            badge=raw.get("badge"),
        )
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Invalid product record {product_id!r}: {exc}") from exc
