"""Application service: Delete Order use case.

Lines and header go in the same unit of work; a failure keeps both.
"""

from __future__ import annotations

import logging

from mythic.application.dto import OrderDTO
from mythic.application.mapping import order_dto
from mythic.domain.exceptions import NotFoundError
from mythic.domain.repository.unit_of_work import UnitOfWork
from mythic.domain.service.order_persister import OrderPersister

logger = logging.getLogger(__name__)


class DeleteOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: str) -> OrderDTO:
        """Delete an order and return its header."""
        with self._uow:
            order = self._uow.orders.get_by_id(order_id)
            if order is None:
                raise NotFoundError(f"Order {order_id} not found")
            OrderPersister(self._uow).remove(order_id)

        logger.info("Order %s deleted", order_id)
        return order_dto(order)
