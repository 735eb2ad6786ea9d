"""Translation of driver failures into domain persistence errors."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import DBAPIError, OperationalError, SQLAlchemyError

from mythic.domain.exceptions import PersistenceError


@contextmanager
def translate_errors(action: str) -> Iterator[None]:
    """Re-raise SQLAlchemy failures as PersistenceErrors.

    Timeouts and dropped connections are marked retryable.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        retryable = isinstance(exc, OperationalError) or (
            isinstance(exc, DBAPIError) and exc.connection_invalidated
        )
        raise PersistenceError(f"Could not {action}", retryable=retryable) from exc
