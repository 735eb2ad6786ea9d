"""Product and Category aggregates.

Products live independently of orders. They have their own lifecycle:
prices change, products are added and removed from the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from mythic.domain.exceptions import FieldError, ValidationError
from mythic.domain.model.value_objects import CENT, Money, new_id

# ten digits before the point, two after
MAX_PRICE = Decimal("9999999999.99")


def _dedupe(ids: list[str] | tuple[str, ...]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(ids))


@dataclass
class Category:
    id: str
    name: str

    @staticmethod
    def create(name: str, category_id: str | None = None) -> Category:
        if not name or not name.strip():
            raise ValidationError.for_fields([FieldError("name", "Category name is required")])
        return Category(id=category_id or new_id(), name=name.strip())


@dataclass
class Product:
    """A product in the catalog.

    Use ``Product.create()`` for new products; ``__init__`` stays simple so
    repositories can reconstitute stored rows without re-validating.
    """

    id: str
    name: str
    description: str
    price: Money
    category_ids: tuple[str, ...] = field(default_factory=tuple)

    @staticmethod
    def create(
        name: str,
        description: str,
        price: Money,
        category_ids: list[str] | tuple[str, ...] = (),
        product_id: str | None = None,
    ) -> Product:
        product = Product(
            id=product_id or new_id(),
            name="",
            description="",
            price=price,
        )
        product.revise(name=name, description=description, price=price, category_ids=category_ids)
        return product

    def revise(
        self,
        name: str | None = None,
        description: str | None = None,
        price: Money | None = None,
        category_ids: list[str] | tuple[str, ...] | None = None,
    ) -> None:
        """Apply the given changes; ``None`` leaves a field untouched.

        All fields are checked before any of them is assigned.  Existing
        orders are unaffected because they keep their own frozen total.
        """
        errors: list[FieldError] = []
        if name is not None and not name.strip():
            errors.append(FieldError("name", "Product name is required"))
        if description is not None and not description.strip():
            errors.append(FieldError("description", "Product description is required"))
        if price is not None:
            if price.amount <= 0:
                errors.append(FieldError("price", "Product price must be greater than zero"))
            elif price.amount > MAX_PRICE:
                errors.append(FieldError("price", f"Product price cannot exceed {MAX_PRICE}"))
            elif price.amount != price.amount.quantize(CENT):
                errors.append(FieldError("price", "Product price cannot have fractions of a cent"))
        if errors:
            raise ValidationError.for_fields(errors)

        if name is not None:
            self.name = name.strip()
        if description is not None:
            self.description = description.strip()
        if price is not None:
            self.price = price
        if category_ids is not None:
            self.category_ids = _dedupe(category_ids)
