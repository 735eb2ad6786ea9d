"""SQLAlchemy unit of work: one session, one transaction."""

from __future__ import annotations

from sqlalchemy.orm import Session, sessionmaker

from mythic.domain.repository.unit_of_work import UnitOfWork
from mythic.infrastructure.persistence.errors import translate_errors
from mythic.infrastructure.persistence.sql_event_repository import SqlEventRepository
from mythic.infrastructure.persistence.sql_order_repository import SqlOrderRepository
from mythic.infrastructure.persistence.sql_product_repository import (
    SqlCategoryRepository,
    SqlProductRepository,
)
from mythic.infrastructure.persistence.sql_user_repository import SqlUserRepository


class SqlUnitOfWork(UnitOfWork):

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory
        self._session: Session | None = None

    def __enter__(self) -> SqlUnitOfWork:
        self._session = self._session_factory()
        self.products = SqlProductRepository(self._session)
        self.categories = SqlCategoryRepository(self._session)
        self.users = SqlUserRepository(self._session)
        self.orders = SqlOrderRepository(self._session)
        self.events = SqlEventRepository(self._session)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            super().__exit__(exc_type, exc, tb)
        finally:
            # closing without commit discards anything left pending
            self._session.close()
            self._session = None

    def commit(self) -> None:
        with translate_errors("commit transaction"):
            self._session.commit()

    def rollback(self) -> None:
        self._session.rollback()
