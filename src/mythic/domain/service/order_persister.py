"""Domain service: Order Persister.

Writes an order header and its association rows as one unit of work.
Either the whole order becomes visible or none of it does.
"""

from __future__ import annotations

import logging

from mythic.domain.exceptions import OrderPersistenceError, PersistenceError
from mythic.domain.model.order import Order
from mythic.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class OrderPersister:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def persist(self, order: Order) -> None:
        """Insert header, then one line per product, then commit."""
        try:
            self._uow.orders.add_header(order)
            for product_id in order.product_ids:
                self._uow.orders.add_line(order.id, product_id)
            self._uow.commit()
        except PersistenceError as exc:
            self._uow.rollback()
            logger.error("Rolled back order %s: %s", order.id, exc.__cause__ or exc)
            raise OrderPersistenceError(
                "The order could not be saved", retryable=exc.retryable
            ) from exc

    def remove(self, order_id: str) -> None:
        """Delete lines and header together."""
        try:
            self._uow.orders.delete(order_id)
            self._uow.commit()
        except PersistenceError as exc:
            self._uow.rollback()
            logger.error("Rolled back deletion of order %s: %s", order_id, exc.__cause__ or exc)
            raise OrderPersistenceError(
                "The order could not be deleted", retryable=exc.retryable
            ) from exc
