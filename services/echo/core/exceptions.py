"""
Custom exception classes.

Represent errors raised while reading an incoming request.
"""

import logging
from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class EchoError(Exception):
    """Base exception class for the echo service."""

    pass


class BodyReadError(EchoError):
    """Raised when the request body or a multipart part cannot be read."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Failed to read request body: {cause}")


class MalformedBodyError(EchoError):
    """Raised when a multipart body cannot be parsed."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Malformed request body: {detail}")


# ===========================================
# Exception Handlers
# ===========================================


async def global_exception_handler(request: Request, exc: Exception):
    """
    Catch-all handler for unhandled exceptions.
    """
    error_detail = str(exc)
    logger.error(
        f"Global exception handler caught: {exc}",
        exc_info=True,
        extra={
            "path": request.url.path,
            "method": request.method,
        },
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal Server Error", "detail": error_detail},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Handler for HTTPException.
    """
    return JSONResponse(status_code=exc.status_code, content={"message": exc.detail})

