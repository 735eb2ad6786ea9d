"""Abstract repository for the Order aggregate.

Writes are split into a header insert and one line insert per product so
the caller decides the unit of work they share.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from mythic.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order with its product ids, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order."""

    @abstractmethod
    def add_header(self, order: Order) -> None:
        """Insert the order header row."""

    @abstractmethod
    def add_line(self, order_id: str, product_id: str) -> None:
        """Insert one order/product association row."""

    @abstractmethod
    def delete(self, order_id: str) -> None:
        """Remove the association rows, then the header."""

    @abstractmethod
    def references_product(self, product_id: str) -> bool:
        """True if any order line points at *product_id*."""
