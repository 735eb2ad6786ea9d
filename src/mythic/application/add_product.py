"""Application service: Add Product use case."""

from __future__ import annotations

import logging
from decimal import Decimal

from mythic.application.dto import ProductDTO
from mythic.application.mapping import product_dtos
from mythic.domain.exceptions import FieldError, ValidationError
from mythic.domain.model.product import Product
from mythic.domain.model.value_objects import Money
from mythic.domain.repository.unit_of_work import UnitOfWork
from mythic.domain.service.referential_integrity import ReferentialIntegrityChecker

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        name: str,
        description: str,
        price: str | Decimal,
        category_ids: list[str] | None = None,
        product_id: str | None = None,
    ) -> ProductDTO:
        """Add a new product; every category it names must exist."""
        product = Product.create(
            name=name,
            description=description,
            price=Money.of(price),
            category_ids=category_ids or [],
            product_id=product_id,
        )
        with self._uow:
            if self._uow.products.get_by_id(product.id) is not None:
                raise ValidationError.for_fields(
                    [FieldError("id", f"Product {product.id} already exists")]
                )
            ReferentialIntegrityChecker(self._uow.categories, "category").confirm(
                product.category_ids
            )
            self._uow.products.save(product)
            self._uow.commit()
            [dto] = product_dtos([product], self._uow.categories)

        logger.info("Product %s '%s' added at %s", product.id, product.name, product.price)
        return dto
