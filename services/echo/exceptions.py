"""
Where: services/echo/exceptions.py
What: Echo exception handler registration and custom HTTP mappings.
Why: Keep error handling setup isolated from route and lifecycle concerns.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.exceptions import (
    BodyReadError,
    MalformedBodyError,
    global_exception_handler,
    http_exception_handler,
)

logger = logging.getLogger("echo.main")


async def body_read_error_handler(request: Request, exc: BodyReadError):
    logger.error(
        str(exc),
        extra={
            "path": request.url.path,
            "method": request.method,
            "error_type": type(exc.cause).__name__,
        },
    )
    return JSONResponse(
        status_code=500,
        content={"message": "Failed to read request body"},
    )


async def malformed_body_handler(request: Request, exc: MalformedBodyError):
    logger.warning(str(exc), extra={"path": request.url.path, "method": request.method})
    return JSONResponse(
        status_code=400,
        content={"message": "Malformed request body", "detail": exc.detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(Exception, global_exception_handler)  # ty: ignore[invalid-argument-type]  # Starlette type stubs incomplete
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # ty: ignore[invalid-argument-type]  # Starlette type stubs incomplete
    app.add_exception_handler(BodyReadError, body_read_error_handler)  # ty: ignore[invalid-argument-type]  # Starlette type stubs incomplete
    app.add_exception_handler(MalformedBodyError, malformed_body_handler)  # ty: ignore[invalid-argument-type]  # Starlette type stubs incomplete
