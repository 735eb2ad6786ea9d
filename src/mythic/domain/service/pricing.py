"""Domain service: Pricing Calculator."""

from __future__ import annotations

from decimal import Decimal

from mythic.domain.model.product import Product
from mythic.domain.model.value_objects import Money

SURCHARGE_MULTIPLIER = Decimal("1.2")


class PricingCalculator:
    """Order total = sum of product prices x 1.2, rounded half-even to cents.

    Pure: the same products always give the same total.
    """

    def __init__(self, multiplier: Decimal = SURCHARGE_MULTIPLIER) -> None:
        self._multiplier = multiplier

    def total_for(self, products: list[Product]) -> Money:
        subtotal = Money.zero()
        for product in products:
            subtotal = subtotal + product.price
        return subtotal.scaled(self._multiplier)
