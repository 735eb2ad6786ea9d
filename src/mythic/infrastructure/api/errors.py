"""Mapping of domain errors to HTTP responses.

This is the only place that knows which status code an ``ErrorKind``
becomes.  Body shape::

    {"error": {"code": "...", "message": "...", ...details}}
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from mythic.domain.exceptions import (
    DomainException,
    ErrorKind,
    FieldError,
    PersistenceError,
    ValidationError,
)

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.REFERENTIAL_INTEGRITY: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.PERSISTENCE: 500,
    ErrorKind.UPSTREAM: 502,
}


def error_body(exc: DomainException) -> dict:
    return {"error": {"code": exc.code, "message": exc.message, **exc.details()}}


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    if isinstance(exc, PersistenceError):
        # the caller gets the generic message; the cause stays in the log
        logger.error(
            "%s %s failed: %s (cause: %r)",
            request.method, request.url.path, exc.message, exc.__cause__,
        )
    return JSONResponse(status_code=STATUS_BY_KIND[exc.kind], content=error_body(exc))


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("%s %s crashed", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": {"code": "internal_error", "message": "Internal server error"}},
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ())]
        if loc and loc[0] in ("body", "query", "path"):
            loc = loc[1:]
        errors.append(FieldError(".".join(loc) or "body", err.get("msg", "Invalid value")))
    return JSONResponse(status_code=400, content=error_body(ValidationError.for_fields(errors)))


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
