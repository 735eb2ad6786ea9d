"""Application service: Show / List Orders (queries).

Orders are enriched with the owning user's public fields and the full
product records.  Totals are returned as stored, never recomputed.
"""

from __future__ import annotations

from mythic.application.dto import OrderDetailsDTO
from mythic.application.mapping import order_dto, product_dtos, user_dto
from mythic.domain.exceptions import NotFoundError
from mythic.domain.model.order import Order
from mythic.domain.repository.unit_of_work import UnitOfWork


class ShowOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: str) -> OrderDetailsDTO:
        with self._uow:
            order = self._uow.orders.get_by_id(order_id)
            if order is None:
                raise NotFoundError(f"Order {order_id} not found")
            return _enrich(self._uow, order)


class ListOrdersHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[OrderDetailsDTO]:
        with self._uow:
            return [_enrich(self._uow, order) for order in self._uow.orders.list_all()]


def _enrich(uow: UnitOfWork, order: Order) -> OrderDetailsDTO:
    user = uow.users.get_by_id(order.user_id)
    products = uow.products.get_many(list(order.product_ids))
    by_id = {p.id: p for p in products}
    ordered = [by_id[pid] for pid in order.product_ids if pid in by_id]
    return OrderDetailsDTO(
        order=order_dto(order),
        user=user_dto(user) if user is not None else None,
        products=product_dtos(ordered, uow.categories),
    )
