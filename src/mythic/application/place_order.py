"""Application service: Place Order use case.

Runs the order workflow inside one unit of work:

    RECEIVED -> VALIDATED -> INTEGRITY_CONFIRMED -> PRICED -> PERSISTED

A failure at any stage ends the request with nothing written.  The
integrity check happens inside the same transaction as the writes and
share-locks the product rows, so a product cannot vanish in between.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from mythic.application.dto import OrderDTO
from mythic.application.mapping import order_dto
from mythic.domain.exceptions import DomainException
from mythic.domain.model.order import Order
from mythic.domain.repository.unit_of_work import UnitOfWork
from mythic.domain.service.order_intake import OrderIntakeValidator
from mythic.domain.service.order_persister import OrderPersister
from mythic.domain.service.pricing import PricingCalculator
from mythic.domain.service.referential_integrity import ReferentialIntegrityChecker

logger = logging.getLogger(__name__)


class PlacementStage(Enum):
    RECEIVED = "received"
    VALIDATED = "validated"
    INTEGRITY_CONFIRMED = "integrity_confirmed"
    PRICED = "priced"
    PERSISTED = "persisted"


class PlaceOrderHandler:

    def __init__(
        self,
        uow: UnitOfWork,
        validator: OrderIntakeValidator | None = None,
        pricing: PricingCalculator | None = None,
    ) -> None:
        self._uow = uow
        self._validator = validator or OrderIntakeValidator()
        self._pricing = pricing or PricingCalculator()

    def handle(self, user_id: Any, product_ids: Any, payment: Any) -> OrderDTO:
        stage = self._reach(PlacementStage.RECEIVED)
        try:
            intake = self._validator.validate(user_id, product_ids, payment)
            stage = self._reach(PlacementStage.VALIDATED)

            with self._uow:
                checker = ReferentialIntegrityChecker(self._uow.products, "product")
                products = checker.confirm(intake.product_ids, lock=True)
                stage = self._reach(PlacementStage.INTEGRITY_CONFIRMED)

                total = self._pricing.total_for(products)
                stage = self._reach(PlacementStage.PRICED)

                order = Order.create(
                    user_id=intake.user_id,
                    product_ids=intake.product_ids,
                    total=total,
                    payment=intake.payment,
                )
                OrderPersister(self._uow).persist(order)
                stage = self._reach(PlacementStage.PERSISTED)
        except DomainException as exc:
            logger.warning("Order placement failed after %s: %s", stage.value, exc.message)
            raise

        logger.info(
            "Order %s placed for user %s (%d products, total %s)",
            order.id, order.user_id, len(order.product_ids), order.total,
        )
        return order_dto(order)

    @staticmethod
    def _reach(stage: PlacementStage) -> PlacementStage:
        logger.debug("Order request %s", stage.value)
        return stage
