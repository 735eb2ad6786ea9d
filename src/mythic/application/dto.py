"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the HTTP/CLI layers and the application layer
without exposing domain internals (password hashes, Money) to the outside.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class CategoryDTO:
    id: str
    name: str


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    description: str
    price: Decimal
    categories: list[CategoryDTO] = field(default_factory=list)

    @property
    def category_ids(self) -> list[str]:
        return [c.id for c in self.categories]


@dataclass(frozen=True)
class UserDTO:
    """Public fields of a user, never the password hash."""

    id: str
    email: str
    name: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: an order header."""

    id: str
    user_id: str
    total: Decimal
    payment: bool
    created_at: datetime


@dataclass(frozen=True)
class OrderDetailsDTO:
    """Output: an order header enriched with its user and products."""

    order: OrderDTO
    user: UserDTO | None
    products: list[ProductDTO]


@dataclass(frozen=True)
class EventDTO:
    id: str
    kind: str
    source: str
    url: str
    visitor: str
    label: str | None
    created_at: datetime
    meta: dict[str, Any]


@dataclass(frozen=True)
class GoalDetailsDTO:
    goal: EventDTO
    views: list[EventDTO]
    actions: list[EventDTO]
