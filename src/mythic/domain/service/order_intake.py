"""Domain service: Order Intake Validator.

Checks the structural shape of an order request before anything touches
the store.  Every check runs; the resulting ValidationError lists all
offending fields at once.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mythic.domain.exceptions import FieldError, ValidationError


@dataclass(frozen=True)
class OrderIntake:
    """A structurally valid order request."""

    user_id: str
    product_ids: tuple[str, ...]  # de-duplicated, first occurrence kept
    payment: bool


class OrderIntakeValidator:

    def validate(self, user_id: Any, product_ids: Any, payment: Any) -> OrderIntake:
        errors: list[FieldError] = []

        if not isinstance(user_id, str) or not user_id.strip():
            errors.append(FieldError("userId", "User id is required"))

        if not isinstance(product_ids, (list, tuple)) or not product_ids:
            errors.append(FieldError("productIds", "At least one product id is required"))
        else:
            for index, product_id in enumerate(product_ids):
                if not isinstance(product_id, str) or not product_id.strip():
                    errors.append(
                        FieldError(f"productIds[{index}]", "Product id must be a non-empty string")
                    )

        # bool only: 0/1 and "true" are rejected
        if not isinstance(payment, bool):
            errors.append(FieldError("payment", "Payment flag must be a boolean"))

        if errors:
            raise ValidationError.for_fields(errors)

        return OrderIntake(
            user_id=user_id.strip(),
            product_ids=tuple(dict.fromkeys(p.strip() for p in product_ids)),
            payment=payment,
        )
