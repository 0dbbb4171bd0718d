"""
Exception Handlers for the FastAPI Application.

- Request validation errors become 400 ``{"message": "Validation error", "errors": [...]}``.
- ``MediaProcessingError`` from the FFmpeg helper becomes 500 with the tool's message.
- Anything else unhandled is logged with an error id and request context and
  returned as a generic 500.
"""

import traceback

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from memopyk.core.logging_config import get_logger
from memopyk.media.ffmpeg import MediaProcessingError

logger = get_logger(__name__)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report invalid request data as 400 with the individual field errors."""
    errors = jsonable_encoder(exc.errors())
    logger.info(f"Validation error in {request.method} {request.url.path}: {len(errors)} error(s)")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Validation error", "errors": errors},
    )


async def media_processing_exception_handler(request: Request, exc: MediaProcessingError) -> JSONResponse:
    """Surface FFmpeg failures as 500 with the tool's error message."""
    logger.error(f"Media processing failed in {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Media processing failed", "error": str(exc)},
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler to log detailed error information.

    Args:
        request: The HTTP request that caused the exception
        exc: The exception that was raised

    Returns:
        JSONResponse with error details and error ID
    """
    error_id = id(exc)

    logger.error(
        f"Unhandled exception [{error_id}] in {request.method} {request.url.path}: {str(exc)}",
        exc_info=True,
        extra={
            "error_id": error_id,
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client": request.client.host if request.client else "unknown",
            "error_type": type(exc).__name__,
            "traceback": traceback.format_exc(),
        },
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
            "error_type": type(exc).__name__,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(MediaProcessingError, media_processing_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")
