"""Order aggregate: an order header plus the products it references.

A product appears at most once per order: there is no quantity, so
repeated ids collapse to membership.  The total is derived from catalog
prices at creation time and never recomputed afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from mythic.domain.exceptions import FieldError, ValidationError
from mythic.domain.model.value_objects import Money, new_id


@dataclass
class Order:
    """Aggregate root for orders.

    Use the ``Order.create()`` factory for new orders.  Once persisted an
    order is immutable except for deletion.
    """

    id: str
    user_id: str
    total: Money
    payment: bool
    product_ids: tuple[str, ...]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        user_id: str,
        product_ids: list[str] | tuple[str, ...],
        total: Money,
        payment: bool,
        order_id: str | None = None,
    ) -> Order:
        """Create a new order header with its product references."""
        errors: list[FieldError] = []
        if not user_id or not user_id.strip():
            errors.append(FieldError("userId", "User id is required"))
        unique_ids = tuple(dict.fromkeys(product_ids))
        if not unique_ids:
            errors.append(FieldError("productIds", "Order must reference at least one product"))
        if not isinstance(payment, bool):
            errors.append(FieldError("payment", "Payment flag must be a boolean"))
        if errors:
            raise ValidationError.for_fields(errors)

        return Order(
            id=order_id or new_id(),
            user_id=user_id.strip(),
            total=total,
            payment=payment,
            product_ids=unique_ids,
        )
