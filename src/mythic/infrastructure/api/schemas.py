"""Request and response bodies.

Request models are the declarative field constraints of each entity; they
run before any handler touches the store.  JSON keys are camelCase.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr
from pydantic.alias_generators import to_camel

from mythic.application.dto import (
    CategoryDTO,
    EventDTO,
    GoalDetailsDTO,
    OrderDetailsDTO,
    OrderDTO,
    ProductDTO,
    UserDTO,
)


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Requests ------------------------------------------------------------------


class CategoryCreate(ApiModel):
    name: str


class ProductCreate(ApiModel):
    name: str
    description: str
    price: Decimal = Field(gt=0)
    category_ids: List[str] = Field(default_factory=list)


class ProductPatch(ApiModel):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = Field(default=None, gt=0)
    category_ids: Optional[List[str]] = None


class UserCreate(ApiModel):
    email: str
    name: str
    password: str


class UserPatch(ApiModel):
    email: Optional[str] = None
    name: Optional[str] = None
    password: Optional[str] = None


class OrderCreate(ApiModel):
    user_id: StrictStr
    product_ids: List[StrictStr] = Field(min_length=1)
    payment: StrictBool


class EventIn(ApiModel):
    source: str
    url: str
    visitor: str
    created_at: Optional[datetime] = None
    meta: Dict[str, Any] = Field(default_factory=dict)
    action: Optional[str] = None
    goal: Optional[str] = None


# --- Responses -----------------------------------------------------------------


class CategoryOut(ApiModel):
    id: str
    name: str

    @classmethod
    def from_dto(cls, dto: CategoryDTO) -> CategoryOut:
        return cls(id=dto.id, name=dto.name)


class ProductOut(ApiModel):
    id: str
    name: str
    description: str
    price: float
    category_ids: List[str]
    categories: List[CategoryOut]

    @classmethod
    def from_dto(cls, dto: ProductDTO) -> ProductOut:
        return cls(
            id=dto.id,
            name=dto.name,
            description=dto.description,
            price=float(dto.price),
            category_ids=dto.category_ids,
            categories=[CategoryOut.from_dto(c) for c in dto.categories],
        )


class UserOut(ApiModel):
    id: str
    email: str
    name: str

    @classmethod
    def from_dto(cls, dto: UserDTO) -> UserOut:
        return cls(id=dto.id, email=dto.email, name=dto.name)


class OrderOut(ApiModel):
    id: str
    user_id: str
    total: float
    payment: bool
    created_at: datetime

    @classmethod
    def from_dto(cls, dto: OrderDTO) -> OrderOut:
        return cls(
            id=dto.id,
            user_id=dto.user_id,
            total=float(dto.total),
            payment=dto.payment,
            created_at=dto.created_at,
        )


class OrderDetailsOut(OrderOut):
    user: Optional[UserOut]
    products: List[ProductOut]

    @classmethod
    def from_details(cls, dto: OrderDetailsDTO) -> OrderDetailsOut:
        header = OrderOut.from_dto(dto.order)
        return cls(
            **header.model_dump(),
            user=UserOut.from_dto(dto.user) if dto.user is not None else None,
            products=[ProductOut.from_dto(p) for p in dto.products],
        )


class EventOut(ApiModel):
    id: str
    source: str
    url: str
    visitor: str
    created_at: datetime
    meta: Dict[str, Any]
    action: Optional[str] = None
    goal: Optional[str] = None

    @classmethod
    def from_dto(cls, dto: EventDTO) -> EventOut:
        labels = {dto.kind: dto.label} if dto.kind in ("action", "goal") else {}
        return cls(
            id=dto.id,
            source=dto.source,
            url=dto.url,
            visitor=dto.visitor,
            created_at=dto.created_at,
            meta=dto.meta,
            **labels,
        )


class GoalDetailsOut(EventOut):
    views: List[EventOut]
    actions: List[EventOut]

    @classmethod
    def from_details(cls, dto: GoalDetailsDTO) -> GoalDetailsOut:
        goal = EventOut.from_dto(dto.goal)
        return cls(
            **goal.model_dump(),
            views=[EventOut.from_dto(v) for v in dto.views],
            actions=[EventOut.from_dto(a) for a in dto.actions],
        )
