"""Application service: Show / Search Products (queries)."""

from __future__ import annotations

from decimal import Decimal

from mythic.application.dto import ProductDTO
from mythic.application.mapping import product_dtos
from mythic.domain.exceptions import NotFoundError
from mythic.domain.repository.unit_of_work import UnitOfWork


class ShowProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: str) -> ProductDTO:
        with self._uow:
            product = self._uow.products.get_by_id(product_id)
            if product is None:
                raise NotFoundError(f"Product {product_id} not found")
            [dto] = product_dtos([product], self._uow.categories)
        return dto


class SearchProductsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        name: str | None = None,
        description: str | None = None,
        max_price: Decimal | None = None,
    ) -> list[ProductDTO]:
        """Case-insensitive substring match on name/description; inclusive price cap."""
        with self._uow:
            products = self._uow.products.search(
                name=name, description=description, max_price=max_price
            )
            return product_dtos(products, self._uow.categories)
