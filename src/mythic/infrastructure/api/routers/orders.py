"""Order endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from mythic.application.delete_order import DeleteOrderHandler
from mythic.application.place_order import PlaceOrderHandler
from mythic.application.show_order import ListOrdersHandler, ShowOrderHandler
from mythic.domain.repository.unit_of_work import UnitOfWork
from mythic.infrastructure.api.dependencies import get_uow
from mythic.infrastructure.api.schemas import OrderCreate, OrderDetailsOut, OrderOut

router = APIRouter()


@router.post("", response_model=OrderOut, status_code=201)
def place_order(body: OrderCreate, uow: UnitOfWork = Depends(get_uow)) -> OrderOut:
    """Place an order; the total is computed from current catalog prices."""
    dto = PlaceOrderHandler(uow).handle(
        user_id=body.user_id, product_ids=body.product_ids, payment=body.payment
    )
    return OrderOut.from_dto(dto)


@router.get("", response_model=List[OrderDetailsOut])
def list_orders(uow: UnitOfWork = Depends(get_uow)) -> List[OrderDetailsOut]:
    return [OrderDetailsOut.from_details(d) for d in ListOrdersHandler(uow).handle()]


@router.get("/{order_id}", response_model=OrderDetailsOut)
def show_order(order_id: str, uow: UnitOfWork = Depends(get_uow)) -> OrderDetailsOut:
    return OrderDetailsOut.from_details(ShowOrderHandler(uow).handle(order_id))


@router.delete("/{order_id}", response_model=OrderOut)
def delete_order(order_id: str, uow: UnitOfWork = Depends(get_uow)) -> OrderOut:
    return OrderOut.from_dto(DeleteOrderHandler(uow).handle(order_id))
