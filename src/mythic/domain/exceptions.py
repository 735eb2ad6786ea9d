"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the HTTP and CLI layers can catch them uniformly.  Each exception carries an
``ErrorKind``, a machine-readable code.  Transport status codes are chosen by
the HTTP layer, never here.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    VALIDATION = "validation_error"
    REFERENTIAL_INTEGRITY = "referential_integrity_error"
    NOT_FOUND = "not_found"
    PERSISTENCE = "persistence_error"
    UPSTREAM = "upstream_error"


@dataclass(frozen=True)
class FieldError:
    """One offending input field."""

    field: str
    message: str


class DomainException(Exception):
    """Base class for all domain errors."""

    kind: ErrorKind = ErrorKind.VALIDATION

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def code(self) -> str:
        return self.kind.value

    def details(self) -> dict:
        """Extra machine-readable context for the caller."""
        return {}


class ValidationError(DomainException):
    """Malformed or missing input, or a violated business rule."""

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, errors: list[FieldError] | None = None) -> None:
        super().__init__(message)
        self.errors = list(errors or [])

    @classmethod
    def for_fields(cls, errors: list[FieldError]) -> ValidationError:
        fields = ", ".join(e.field for e in errors)
        return cls(f"Invalid fields: {fields}", errors)

    def details(self) -> dict:
        if not self.errors:
            return {}
        return {"fields": [{"field": e.field, "message": e.message} for e in self.errors]}


class ReferentialIntegrityError(DomainException):
    """A referenced entity does not exist."""

    kind = ErrorKind.REFERENTIAL_INTEGRITY

    def __init__(self, entity: str, missing_ids: list[str]) -> None:
        super().__init__(f"Unknown {entity} ids: {', '.join(missing_ids)}")
        self.entity = entity
        self.missing_ids = list(missing_ids)

    def details(self) -> dict:
        return {"entity": self.entity, "missingIds": self.missing_ids}


class NotFoundError(DomainException):
    """A requested entity does not exist."""

    kind = ErrorKind.NOT_FOUND


class PersistenceError(DomainException):
    """A write to the store failed and was rolled back.

    ``retryable`` is set when the failure was transient (timeout, dropped
    connection) and repeating the request may succeed.
    """

    kind = ErrorKind.PERSISTENCE

    def __init__(self, message: str, retryable: bool = False) -> None:
        super().__init__(message)
        self.retryable = retryable

    def details(self) -> dict:
        return {"retryable": self.retryable}


class OrderPersistenceError(PersistenceError):
    """Writing an order header or its lines failed; nothing was kept."""


class UpstreamError(DomainException):
    """An external API call failed or timed out."""

    kind = ErrorKind.UPSTREAM
