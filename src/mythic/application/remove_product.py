"""Application service: Remove Product use case.

Products referenced by an order cannot be removed: order lines are an
immutable historical record.
"""

from __future__ import annotations

import logging

from mythic.application.dto import ProductDTO
from mythic.application.mapping import product_dtos
from mythic.domain.exceptions import NotFoundError, ValidationError
from mythic.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class RemoveProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: str) -> ProductDTO:
        with self._uow:
            product = self._uow.products.get_by_id(product_id)
            if product is None:
                raise NotFoundError(f"Product {product_id} not found")
            if self._uow.orders.references_product(product_id):
                raise ValidationError(
                    f"Product {product_id} is referenced by existing orders"
                )
            [dto] = product_dtos([product], self._uow.categories)
            self._uow.products.delete(product_id)
            self._uow.commit()

        logger.info("Product %s removed", product_id)
        return dto
