"""Product and category endpoints."""

from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from mythic.application.add_product import AddProductHandler
from mythic.application.categories import (
    AddCategoryHandler,
    ListCategoriesHandler,
    ShowCategoryHandler,
)
from mythic.application.remove_product import RemoveProductHandler
from mythic.application.show_product import SearchProductsHandler, ShowProductHandler
from mythic.application.update_product import UpdateProductHandler
from mythic.domain.repository.unit_of_work import UnitOfWork
from mythic.infrastructure.api.dependencies import get_uow
from mythic.infrastructure.api.schemas import (
    CategoryCreate,
    CategoryOut,
    ProductCreate,
    ProductOut,
    ProductPatch,
)

router = APIRouter()
categories_router = APIRouter()


@router.post("", response_model=ProductOut, status_code=201)
def add_product(body: ProductCreate, uow: UnitOfWork = Depends(get_uow)) -> ProductOut:
    dto = AddProductHandler(uow).handle(
        name=body.name,
        description=body.description,
        price=body.price,
        category_ids=body.category_ids,
    )
    return ProductOut.from_dto(dto)


@router.get("", response_model=List[ProductOut])
def search_products(
    name: Optional[str] = None,
    description: Optional[str] = None,
    price: Optional[Decimal] = Query(default=None, ge=0, description="Maximum price"),
    uow: UnitOfWork = Depends(get_uow),
) -> List[ProductOut]:
    dtos = SearchProductsHandler(uow).handle(name=name, description=description, max_price=price)
    return [ProductOut.from_dto(d) for d in dtos]


@router.get("/{product_id}", response_model=ProductOut)
def show_product(product_id: str, uow: UnitOfWork = Depends(get_uow)) -> ProductOut:
    return ProductOut.from_dto(ShowProductHandler(uow).handle(product_id))


@router.put("/{product_id}", response_model=ProductOut)
def replace_product(
    product_id: str, body: ProductCreate, uow: UnitOfWork = Depends(get_uow)
) -> ProductOut:
    dto = UpdateProductHandler(uow).handle(
        product_id,
        name=body.name,
        description=body.description,
        price=body.price,
        category_ids=body.category_ids,
    )
    return ProductOut.from_dto(dto)


@router.patch("/{product_id}", response_model=ProductOut)
def patch_product(
    product_id: str, body: ProductPatch, uow: UnitOfWork = Depends(get_uow)
) -> ProductOut:
    dto = UpdateProductHandler(uow).handle(
        product_id,
        name=body.name,
        description=body.description,
        price=body.price,
        category_ids=body.category_ids,
    )
    return ProductOut.from_dto(dto)


@router.delete("/{product_id}", response_model=ProductOut)
def remove_product(product_id: str, uow: UnitOfWork = Depends(get_uow)) -> ProductOut:
    return ProductOut.from_dto(RemoveProductHandler(uow).handle(product_id))


@categories_router.post("", response_model=CategoryOut, status_code=201)
def add_category(body: CategoryCreate, uow: UnitOfWork = Depends(get_uow)) -> CategoryOut:
    return CategoryOut.from_dto(AddCategoryHandler(uow).handle(body.name))


@categories_router.get("", response_model=List[CategoryOut])
def list_categories(uow: UnitOfWork = Depends(get_uow)) -> List[CategoryOut]:
    return [CategoryOut.from_dto(c) for c in ListCategoriesHandler(uow).handle()]


@categories_router.get("/{category_id}", response_model=CategoryOut)
def show_category(category_id: str, uow: UnitOfWork = Depends(get_uow)) -> CategoryOut:
    return CategoryOut.from_dto(ShowCategoryHandler(uow).handle(category_id))
