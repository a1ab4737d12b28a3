"""
Custom exceptions and handlers for consistent API error responses.

Every error leaving the API has the shape
``{"error": <message>, "error_code": <code>, "path": <request path>}``.
Unexpected failures are logged with their traceback and reported with a
generic message only.
"""

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)


class APIError(HTTPException):
    """Base API error with consistent structure"""

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: Optional[str] = None,
        headers: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.error_code = error_code


class NotFoundError(APIError):
    """Resource not found error"""

    def __init__(
        self, detail: str = "Resource not found", error_code: str = "NOT_FOUND"
    ):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND, detail=detail, error_code=error_code
        )


class ValidationError(APIError):
    """Validation error"""

    def __init__(
        self, detail: str = "Validation failed", error_code: str = "VALIDATION_ERROR"
    ):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            error_code=error_code,
        )


class InternalError(APIError):
    """Unexpected failure, reported without internal details"""

    def __init__(
        self, detail: str = "Internal server error", error_code: str = "INTERNAL_ERROR"
    ):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            error_code=error_code,
        )


def _error_response(
    request: Request,
    status_code: int,
    message: str,
    error_code: Optional[str],
    headers: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": message,
            "error_code": error_code,
            "path": str(request.url.path),
        },
        headers=headers,
    )


async def handle_api_error(request: Request, exc: APIError) -> JSONResponse:
    """Handle custom API errors"""
    return _error_response(
        request, exc.status_code, exc.detail, exc.error_code, exc.headers
    )


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Framework errors (unknown route, wrong method) in the same shape"""
    return _error_response(
        request, exc.status_code, str(exc.detail), "HTTP_ERROR", exc.headers
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request bodies are a client error, not a 422"""
    logger.warning(f"Invalid request body at {request.url.path}: {exc.errors()}")
    return _error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "Invalid request body",
        "VALIDATION_ERROR",
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: never leak internals to the caller"""
    logger.exception(f"Unhandled error at {request.url.path}: {exc}")
    return _error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal server error",
        "INTERNAL_ERROR",
    )


def register_exception_handlers(app):
    """Register all exception handlers with the FastAPI app"""
    app.add_exception_handler(APIError, handle_api_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
