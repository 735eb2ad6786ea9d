"""SQLAlchemy-backed order repository.

Every write flushes immediately so a failure surfaces at the step that
caused it; nothing is committed here.
"""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy.orm import Session

from mythic.domain.model.order import Order
from mythic.domain.model.value_objects import Money
from mythic.domain.repository.order_repository import OrderRepository
from mythic.infrastructure.persistence.errors import translate_errors
from mythic.infrastructure.persistence.orm import OrderLineRow, OrderRow


class SqlOrderRepository(OrderRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, order_id: str) -> Order | None:
        with translate_errors("load order"):
            row = self._session.get(OrderRow, order_id)
            if row is None:
                return None
            return self._to_domain(row, self._product_ids(order_id))

    def list_all(self) -> list[Order]:
        with translate_errors("list orders"):
            rows = self._session.query(OrderRow).order_by(OrderRow.created_at, OrderRow.id).all()
            lines: dict[str, list[str]] = {}
            for line in self._session.query(OrderLineRow).order_by(OrderLineRow.product_id):
                lines.setdefault(line.order_id, []).append(line.product_id)
        return [self._to_domain(r, lines.get(r.id, [])) for r in rows]

    def add_header(self, order: Order) -> None:
        with translate_errors(f"insert order {order.id}"):
            self._session.add(
                OrderRow(
                    id=order.id,
                    user_id=order.user_id,
                    total=order.total.amount,
                    payment=order.payment,
                    created_at=order.created_at,
                )
            )
            self._session.flush()

    def add_line(self, order_id: str, product_id: str) -> None:
        with translate_errors(f"insert line {order_id}/{product_id}"):
            self._session.add(OrderLineRow(order_id=order_id, product_id=product_id))
            self._session.flush()

    def delete(self, order_id: str) -> None:
        with translate_errors(f"delete order {order_id}"):
            self._session.query(OrderLineRow).filter(OrderLineRow.order_id == order_id).delete()
            self._session.query(OrderRow).filter(OrderRow.id == order_id).delete()

    def references_product(self, product_id: str) -> bool:
        with translate_errors("check order lines"):
            line = (
                self._session.query(OrderLineRow.order_id)
                .filter(OrderLineRow.product_id == product_id)
                .first()
            )
        return line is not None

    def _product_ids(self, order_id: str) -> list[str]:
        rows = (
            self._session.query(OrderLineRow.product_id)
            .filter(OrderLineRow.order_id == order_id)
            .order_by(OrderLineRow.product_id)
            .all()
        )
        return [r.product_id for r in rows]

    @staticmethod
    def _to_domain(row: OrderRow, product_ids: list[str]) -> Order:
        return Order(
            id=row.id,
            user_id=row.user_id,
            total=Money(Decimal(row.total)),
            payment=row.payment,
            product_ids=tuple(product_ids),
            created_at=row.created_at,
        )
