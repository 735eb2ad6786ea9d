"""SQLAlchemy-backed product and category repositories."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy.orm import Session

from mythic.domain.model.product import Category, Product
from mythic.domain.model.value_objects import Money
from mythic.domain.repository.product_repository import CategoryRepository, ProductRepository
from mythic.infrastructure.persistence.errors import translate_errors
from mythic.infrastructure.persistence.orm import CategoryRow, ProductRow


class SqlProductRepository(ProductRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, product_id: str) -> Product | None:
        with translate_errors("load product"):
            row = self._session.get(ProductRow, product_id)
        return self._to_domain(row) if row is not None else None

    def get_many(self, product_ids: list[str], lock: bool = False) -> list[Product]:
        if not product_ids:
            return []
        with translate_errors("load products"):
            query = self._session.query(ProductRow).filter(ProductRow.id.in_(product_ids))
            if lock:
                # FOR SHARE on Postgres: blocks concurrent deletes until commit
                query = query.with_for_update(read=True)
            rows = query.all()
        return [self._to_domain(r) for r in rows]

    def search(
        self,
        name: str | None = None,
        description: str | None = None,
        max_price: Decimal | None = None,
    ) -> list[Product]:
        query = self._session.query(ProductRow)
        if name is not None:
            query = query.filter(ProductRow.name.ilike(f"%{name}%"))
        if description is not None:
            query = query.filter(ProductRow.description.ilike(f"%{description}%"))
        if max_price is not None:
            query = query.filter(ProductRow.price <= max_price)
        with translate_errors("search products"):
            rows = query.order_by(ProductRow.name, ProductRow.id).all()
        return [self._to_domain(r) for r in rows]

    def save(self, product: Product) -> None:
        with translate_errors(f"save product {product.id}"):
            row = self._session.get(ProductRow, product.id)
            if row is None:
                row = ProductRow(id=product.id)
                self._session.add(row)
            row.name = product.name
            row.description = product.description
            row.price = product.price.amount
            row.categories = (
                self._session.query(CategoryRow)
                .filter(CategoryRow.id.in_(product.category_ids))
                .all()
                if product.category_ids
                else []
            )
            self._session.flush()

    def delete(self, product_id: str) -> None:
        with translate_errors(f"delete product {product_id}"):
            row = self._session.get(ProductRow, product_id)
            if row is not None:
                self._session.delete(row)
                self._session.flush()

    @staticmethod
    def _to_domain(row: ProductRow) -> Product:
        return Product(
            id=row.id,
            name=row.name,
            description=row.description,
            price=Money(Decimal(row.price)),
            category_ids=tuple(sorted(c.id for c in row.categories)),
        )


class SqlCategoryRepository(CategoryRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, category_id: str) -> Category | None:
        with translate_errors("load category"):
            row = self._session.get(CategoryRow, category_id)
        return Category(id=row.id, name=row.name) if row is not None else None

    def get_many(self, category_ids: list[str], lock: bool = False) -> list[Category]:
        if not category_ids:
            return []
        with translate_errors("load categories"):
            query = self._session.query(CategoryRow).filter(CategoryRow.id.in_(category_ids))
            if lock:
                query = query.with_for_update(read=True)
            rows = query.all()
        return [Category(id=r.id, name=r.name) for r in rows]

    def list_all(self) -> list[Category]:
        with translate_errors("list categories"):
            rows = self._session.query(CategoryRow).order_by(CategoryRow.name).all()
        return [Category(id=r.id, name=r.name) for r in rows]

    def save(self, category: Category) -> None:
        with translate_errors(f"save category {category.id}"):
            self._session.merge(CategoryRow(id=category.id, name=category.name))
            self._session.flush()
