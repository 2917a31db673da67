"""Error Handlers — map failures to HTTP responses.

Four layers: domain errors through ``ERROR_STATUS``, request-shape
errors as 400, HTTP errors raised by routing or handlers, and a catch-all
500 that never leaks internal details. All of them share the
``{"error": {"code", "message"}}`` envelope.
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ims.domain.exceptions import DomainException, EntityNotFoundError, ValidationError

logger = logging.getLogger(__name__)

# Most specific first; the first match wins.
ERROR_STATUS: list[tuple[type[DomainException], int]] = [
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationError, 422),
]


def status_for(exc: DomainException) -> int:
    for kind, code in ERROR_STATUS:
        if isinstance(exc, kind):
            return code
    return 422


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(DomainException)
    async def domain_error_handler(request: Request, exc: DomainException):
        code = type(exc).__name__
        logger.warning(
            f"{code}: {exc}",
            extra={"error_code": code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=status_for(exc),
            content={"error": {"code": code, "message": str(exc)}},
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        try:
            code = HTTPStatus(exc.status_code).name
        except ValueError:
            code = "HTTP_ERROR"
        logger.warning(
            f"{exc.status_code} on {request.url.path}: {exc.detail}",
            extra={"error_code": code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": {"code": code, "message": str(exc.detail)}},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=exc,
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "Something went wrong. Please try again later.",
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
