"""Domain -> DTO mapping shared by the handlers."""

from __future__ import annotations

from mythic.application.dto import CategoryDTO, EventDTO, OrderDTO, ProductDTO, UserDTO
from mythic.domain.model.event import AnalyticsEvent
from mythic.domain.model.order import Order
from mythic.domain.model.product import Category, Product
from mythic.domain.model.user import User
from mythic.domain.repository.product_repository import CategoryRepository


def category_dto(category: Category) -> CategoryDTO:
    return CategoryDTO(id=category.id, name=category.name)


def product_dtos(products: list[Product], categories: CategoryRepository) -> list[ProductDTO]:
    """Map products, resolving their categories in one lookup."""
    wanted = list(dict.fromkeys(cid for p in products for cid in p.category_ids))
    known = {c.id: c for c in categories.get_many(wanted)} if wanted else {}
    return [
        ProductDTO(
            id=p.id,
            name=p.name,
            description=p.description,
            price=p.price.amount,
            categories=[category_dto(known[cid]) for cid in p.category_ids if cid in known],
        )
        for p in products
    ]


def user_dto(user: User) -> UserDTO:
    return UserDTO(id=user.id, email=str(user.email), name=user.name)


def order_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        user_id=order.user_id,
        total=order.total.amount,
        payment=order.payment,
        created_at=order.created_at,
    )


def event_dto(event: AnalyticsEvent) -> EventDTO:
    return EventDTO(
        id=event.id,
        kind=event.kind.value,
        source=event.source,
        url=event.url,
        visitor=event.visitor,
        label=event.label,
        created_at=event.created_at,
        meta=dict(event.meta),
    )
