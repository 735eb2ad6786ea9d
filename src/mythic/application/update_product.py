"""Application service: Update Product use case (full or partial)."""

from __future__ import annotations

from decimal import Decimal

from mythic.application.dto import ProductDTO
from mythic.application.mapping import product_dtos
from mythic.domain.exceptions import NotFoundError, ValidationError
from mythic.domain.model.value_objects import Money
from mythic.domain.repository.unit_of_work import UnitOfWork
from mythic.domain.service.referential_integrity import ReferentialIntegrityChecker


class UpdateProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        product_id: str,
        name: str | None = None,
        description: str | None = None,
        price: str | Decimal | None = None,
        category_ids: list[str] | None = None,
    ) -> ProductDTO:
        """Apply the given fields; ``None`` leaves a field untouched.

        A full replacement simply passes every field.  This does NOT
        affect existing orders; their totals are frozen.
        """
        if name is None and description is None and price is None and category_ids is None:
            raise ValidationError("Nothing to update")

        with self._uow:
            product = self._uow.products.get_by_id(product_id)
            if product is None:
                raise NotFoundError(f"Product {product_id} not found")

            if category_ids is not None:
                ReferentialIntegrityChecker(self._uow.categories, "category").confirm(category_ids)
            product.revise(
                name=name,
                description=description,
                price=Money.of(price) if price is not None else None,
                category_ids=category_ids,
            )
            self._uow.products.save(product)
            self._uow.commit()
            [dto] = product_dtos([product], self._uow.categories)
        return dto
