"""Database engine, session factory and the storage context.

A single ``StorageContext`` is built at startup and handed to the HTTP
app and the CLI.  Nothing in this package keeps a module-level engine.
"""

from __future__ import annotations

import logging

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from mythic.infrastructure.persistence.orm import Base
from mythic.infrastructure.persistence.unit_of_work import SqlUnitOfWork

logger = logging.getLogger(__name__)


class StorageContext:
    """Owns the engine and hands out units of work."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self.session_factory = sessionmaker(
            bind=engine, autocommit=False, autoflush=False, expire_on_commit=False
        )

    @classmethod
    def from_url(cls, url: str, statement_timeout_ms: int = 0) -> StorageContext:
        engine = create_engine(url, **engine_options(url, statement_timeout_ms))
        if url.startswith("sqlite"):
            event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return cls(engine)

    def unit_of_work(self) -> SqlUnitOfWork:
        return SqlUnitOfWork(self.session_factory)

    def init_db(self) -> None:
        """Create every table that does not exist yet."""
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables ready")

    def dispose(self) -> None:
        self.engine.dispose()


def engine_options(url: str, statement_timeout_ms: int = 0) -> dict:
    """Keyword arguments for ``create_engine`` suited to the URL's backend."""
    if url.startswith("sqlite"):
        options: dict = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            # an in-memory database exists per connection
            options["poolclass"] = StaticPool
        return options

    connect_args = {}
    if statement_timeout_ms:
        connect_args["options"] = f"-c statement_timeout={statement_timeout_ms}"
    return {
        "pool_pre_ping": True,
        "pool_size": 10,
        "max_overflow": 20,
        "pool_recycle": 3600,
        "connect_args": connect_args,
    }


def _enable_sqlite_foreign_keys(dbapi_connection, _record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()

