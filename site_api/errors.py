"""Domain errors and their HTTP mapping.

Every API error is rendered in the same envelope:
    { "error": { "code": str, "message": str, "detail": object | null } }

- ClientInputError -> 400 (missing fields, bad payload, bad export type, no upload)
- NotFoundError    -> 404 (lookup yields nothing)
- StorageError     -> 500 (persistence layer fault, underlying message in detail)
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from site_api.schemas.common import ErrorDetail, ErrorResponse

logger = logging.getLogger("uvicorn.error")


class SiteApiError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.detail = detail


class ClientInputError(SiteApiError):
    status_code = 400
    code = "INVALID_INPUT"


class NotFoundError(SiteApiError):
    status_code = 404
    code = "NOT_FOUND"


class StorageError(SiteApiError):
    """The persistence layer failed. Never used for "record absent"."""

    status_code = 500
    code = "STORAGE_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__("Server error", detail={"error": message})


def error_response(status_code: int, code: str, message: str, detail: Any = None) -> JSONResponse:
    """Render the structured error envelope."""
    body = ErrorResponse(error=ErrorDetail(code=code, message=message, detail=detail))
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def register_exception_handlers(app: FastAPI, *, debug: bool = False) -> None:
    """Attach handlers mapping domain errors onto HTTP responses."""

    @app.exception_handler(SiteApiError)
    async def site_api_error_handler(request: Request, exc: SiteApiError) -> JSONResponse:
        if isinstance(exc, StorageError):
            logger.error(
                f"Storage error on {request.method} {request.url.path}: {exc.detail['error']}",
                exc_info=exc,
            )
        return error_response(exc.status_code, exc.code, exc.message, exc.detail)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Malformed bodies are client input errors like any other."""
        return error_response(
            400,
            ClientInputError.code,
            "Invalid request payload.",
            {"errors": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler returning structured error format."""
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return error_response(
            500,
            "INTERNAL_ERROR",
            str(exc) if debug else "Internal server error",
        )
