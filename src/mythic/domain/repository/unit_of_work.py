"""Unit of Work: groups repository writes into one atomic change.

Usage::

    with uow:
        uow.orders.add_header(order)
        uow.commit()

Leaving the block without ``commit()`` discards every write; leaving it
with an exception rolls back first.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from mythic.domain.repository.event_repository import EventRepository
from mythic.domain.repository.order_repository import OrderRepository
from mythic.domain.repository.product_repository import CategoryRepository, ProductRepository
from mythic.domain.repository.user_repository import UserRepository


class UnitOfWork(ABC):

    products: ProductRepository
    categories: CategoryRepository
    users: UserRepository
    orders: OrderRepository
    events: EventRepository

    def __enter__(self) -> UnitOfWork:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            self.rollback()

    @abstractmethod
    def commit(self) -> None:
        """Make every write since the last commit durable."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard every write since the last commit."""
