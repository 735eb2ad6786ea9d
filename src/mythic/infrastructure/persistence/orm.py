"""SQLAlchemy table mappings.

Rows are mapped to and from domain objects by the repositories; the
rest of the code never sees these classes.
"""

from __future__ import annotations

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Numeric,
    String,
    Table,
    Text,
)
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()

product_categories = Table(
    "product_categories",
    Base.metadata,
    Column("product_id", String(64), ForeignKey("products.id", ondelete="CASCADE"), primary_key=True),
    Column("category_id", String(64), ForeignKey("categories.id"), primary_key=True),
)


class CategoryRow(Base):
    __tablename__ = "categories"

    id = Column(String(64), primary_key=True)
    name = Column(String(255), nullable=False)


class ProductRow(Base):
    __tablename__ = "products"

    id = Column(String(64), primary_key=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Numeric(12, 2), nullable=False)

    categories = relationship(CategoryRow, secondary=product_categories, lazy="selectin")


class UserRow(Base):
    __tablename__ = "users"

    id = Column(String(64), primary_key=True)
    email = Column(String(320), nullable=False, unique=True)
    name = Column(String(255), nullable=False)
    password_hash = Column(String(128), nullable=False)


class OrderRow(Base):
    """Order header.  ``user_id`` has no foreign key; the user may be gone."""

    __tablename__ = "orders"

    id = Column(String(64), primary_key=True)
    user_id = Column(String(64), nullable=False, index=True)
    total = Column(Numeric(12, 2), nullable=False)
    payment = Column(Boolean, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)


class OrderLineRow(Base):
    __tablename__ = "order_lines"

    order_id = Column(String(64), ForeignKey("orders.id"), primary_key=True)
    product_id = Column(String(64), ForeignKey("products.id"), primary_key=True, index=True)


class EventRow(Base):
    __tablename__ = "analytics_events"

    id = Column(String(64), primary_key=True)
    kind = Column(String(16), nullable=False, index=True)
    source = Column(String(255), nullable=False)
    url = Column(Text, nullable=False)
    visitor = Column(String(255), nullable=False, index=True)
    label = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    meta = Column(JSON, nullable=False, default=dict)
