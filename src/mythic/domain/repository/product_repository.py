"""Abstract repositories for the Product and Category aggregates.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from mythic.domain.model.product import Category, Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_many(self, product_ids: list[str], lock: bool = False) -> list[Product]:
        """Return the products among *product_ids* that exist.

        With ``lock`` the rows stay share-locked until the surrounding
        unit of work ends, so they cannot be deleted concurrently.
        """

    @abstractmethod
    def search(
        self,
        name: str | None = None,
        description: str | None = None,
        max_price: Decimal | None = None,
    ) -> list[Product]:
        """Return products matching every given filter (all when none)."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    @abstractmethod
    def delete(self, product_id: str) -> None:
        """Remove a product."""


class CategoryRepository(ABC):

    @abstractmethod
    def get_by_id(self, category_id: str) -> Category | None:
        """Return a category by its ID, or None if not found."""

    @abstractmethod
    def get_many(self, category_ids: list[str], lock: bool = False) -> list[Category]:
        """Return the categories among *category_ids* that exist."""

    @abstractmethod
    def list_all(self) -> list[Category]:
        """Return every category."""

    @abstractmethod
    def save(self, category: Category) -> None:
        """Persist a new or updated category."""
