"""Application services: Category use cases."""

from __future__ import annotations

from mythic.application.dto import CategoryDTO
from mythic.application.mapping import category_dto
from mythic.domain.exceptions import FieldError, NotFoundError, ValidationError
from mythic.domain.model.product import Category
from mythic.domain.repository.unit_of_work import UnitOfWork


class AddCategoryHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, name: str, category_id: str | None = None) -> CategoryDTO:
        category = Category.create(name, category_id=category_id)
        with self._uow:
            if self._uow.categories.get_by_id(category.id) is not None:
                raise ValidationError.for_fields(
                    [FieldError("id", f"Category {category.id} already exists")]
                )
            self._uow.categories.save(category)
            self._uow.commit()
        return category_dto(category)


class ShowCategoryHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, category_id: str) -> CategoryDTO:
        with self._uow:
            category = self._uow.categories.get_by_id(category_id)
        if category is None:
            raise NotFoundError(f"Category {category_id} not found")
        return category_dto(category)


class ListCategoriesHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[CategoryDTO]:
        with self._uow:
            return [category_dto(c) for c in self._uow.categories.list_all()]
