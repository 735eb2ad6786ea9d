"""Composition root for the CLI: wires concrete implementations to
domain interfaces.

The storage context is built once per process from the settings.
"""

from __future__ import annotations

from functools import lru_cache

from mythic.domain.repository.unit_of_work import UnitOfWork
from mythic.infrastructure.config import get_settings
from mythic.infrastructure.persistence.database import StorageContext


@lru_cache
def storage_context() -> StorageContext:
    settings = get_settings()
    return StorageContext.from_url(settings.SQLALCHEMY_DATABASE_URI, settings.STATEMENT_TIMEOUT_MS)


def unit_of_work() -> UnitOfWork:
    return storage_context().unit_of_work()
