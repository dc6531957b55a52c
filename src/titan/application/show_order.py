"""Application service: Show Order use case (query)."""

from __future__ import annotations

from titan.application.dto import OrderDTO, OrderLineItemDTO
from titan.domain.exceptions import EntityNotFoundError
from titan.domain.model.order import Order
from titan.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError("Order not found")
        return self._to_dto(order)

    @staticmethod
    def _to_dto(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            customer_name=order.customer.name,
            customer_email=order.customer.email,
            customer_address=order.customer.address,
            status=order.status.value,
            items=[
                OrderLineItemDTO(
                    product_id=item.product_id,
                    product_name=item.product_name,
                    quantity=item.quantity.value,
                    unit_price=item.unit_price.amount,
                    line_total=item.line_total.amount,
                    image=item.image,
                )
                for item in order.items
            ],
            total=order.total.amount,
            created_at=order.created_at.isoformat(),
        )
