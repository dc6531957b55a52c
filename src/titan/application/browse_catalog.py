"""Application services: catalog queries.

Thin read-side handlers over the catalog of record. The cart uses these
results only as add-time snapshots; checkout never trusts them.
"""

from __future__ import annotations

from titan.application.dto import CategoryCountDTO, ProductDTO
from titan.domain.exceptions import EntityNotFoundError
from titan.domain.model.product import Product
from titan.domain.repository.product_repository import ProductRepository


def to_product_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        price=product.price.amount,
        image=product.image,
        category=product.category,
        description=product.description,
        rating=product.rating,
        review_count=product.review_count,
        badge=product.badge,
    )


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        category: str | None = None,
        search: str | None = None,
        sort: str | None = None,
    ) -> list[ProductDTO]:
        products = self._product_repo.search(category=category, search=search, sort=sort)
        return [to_product_dto(p) for p in products]


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product not found")
        return to_product_dto(product)


class ListCategoriesHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[CategoryCountDTO]:
        return [
            CategoryCountDTO(category=name, count=count)
            for name, count in self._product_repo.categories()
        ]
