"""Error Handlers: map the error taxonomy onto HTTP responses.

Every failure is a non-2xx status with an ``{"Error": "..."}`` body:

| Raised                          | Status |
|---------------------------------|--------|
| ValidationError, bad JSON body  | 400    |
| UniqueConstraintViolation       | 409    |
| StoreUnavailable                | 503    |
| wrong HTTP verb / unknown path  | 405 / 404 |
| anything else                   | 500 (message not leaked) |
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from mailinglist.domain import (
    StoreUnavailable,
    UniqueConstraintViolation,
    ValidationError,
)

from .schemas import ErrorBody

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MSG = "internal server error"  # pragma: no mutate


def error_response(
    status_code: int, message: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    """Build an ``{"Error": message}`` JSON response."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorBody(Error=message).model_dump(),
        headers=headers,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI app."""
    _register_taxonomy_handlers(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_taxonomy_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.warning("Invalid request on %s: %s", request.url.path, exc)
        return error_response(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(UniqueConstraintViolation)
    async def unique_violation_handler(
        request: Request, exc: UniqueConstraintViolation
    ):
        logger.warning("Conflict on %s: %s", request.url.path, exc)
        return error_response(status.HTTP_409_CONFLICT, str(exc))

    @app.exception_handler(StoreUnavailable)
    async def store_unavailable_handler(request: Request, exc: StoreUnavailable):
        logger.error("Store unavailable on %s: %s", request.url.path, exc)
        return error_response(status.HTTP_503_SERVICE_UNAVAILABLE, str(exc))


def _register_validation_error_handler(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError
    ):
        message = "; ".join(
            f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
            for e in exc.errors()
        )
        logger.warning("Malformed request on %s: %s", request.url.path, message)
        return error_response(status.HTTP_400_BAD_REQUEST, message)


def _register_http_error_handler(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        logger.warning(
            "%s %s -> %d %s",
            request.method,
            request.url.path,
            exc.status_code,
            exc.detail,
        )
        return error_response(exc.status_code, str(exc.detail), headers=exc.headers)


def _register_generic_error_handler(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception on %s: %s", request.url.path, exc, exc_info=True
        )
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MSG
        )
