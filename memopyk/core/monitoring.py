"""
Monitoring and Tracing Configuration Module.

This module provides integration with Pydantic Logfire for monitoring and
tracing of the MEMOPYK backend, including:
- API endpoint tracing
- Database operation monitoring
- Outbound HTTP calls (image validation, fetch-as-google)
- FFmpeg media job outcomes

Logfire stays dormant unless ``LOGFIRE_ENABLED`` is true and a token is set;
the ``log_*`` helpers are safe to call either way.
"""

import logging
from typing import Any, Optional

import logfire
from fastapi import FastAPI

from memopyk.server.core.config import settings

logger = logging.getLogger(__name__)


def initialize_logfire(app: FastAPI | None = None) -> bool:
    """
    Initialize Pydantic Logfire for monitoring and tracing.

    This function sets up Logfire with automatic instrumentation for:
    - SQLAlchemy database operations
    - HTTPX HTTP requests
    - FastAPI endpoints

    Args:
        app: FastAPI application instance for FastAPI instrumentation (optional).

    Returns:
        True when Logfire was configured, False when it stays disabled.
    """
    config = settings.logfire
    if not config.enabled:
        logger.info("Logfire monitoring is disabled. Set LOGFIRE_ENABLED=true to enable.")
        return False

    if not config.token:
        logger.warning(
            "Logfire is enabled but LOGFIRE_TOKEN is not set. "
            "Monitoring will not work. Set LOGFIRE_TOKEN to enable Logfire."
        )
        return False

    try:
        logfire.configure(
            token=config.token,
            service_name=config.service_name,
            environment=config.environment,
        )
    except Exception as e:
        logger.error(f"Failed to initialize Logfire: {e}", exc_info=True)
        return False

    try:
        logfire.instrument_sqlalchemy()
        logger.info("Logfire: SQLAlchemy instrumentation enabled")
    except Exception as e:
        logger.warning(f"Failed to instrument SQLAlchemy: {e}")

    try:
        logfire.instrument_httpx()
        logger.info("Logfire: HTTPX instrumentation enabled")
    except Exception as e:
        logger.warning(f"Failed to instrument HTTPX: {e}")

    if app is not None:
        try:
            logfire.instrument_fastapi(app=app)
            logger.info("Logfire: FastAPI instrumentation enabled")
        except Exception as e:
            logger.warning(f"Failed to instrument FastAPI: {e}")
    else:
        logger.debug("FastAPI app instance not provided, skipping FastAPI instrumentation")

    logger.info(
        f"Logfire monitoring initialized: environment={config.environment}, service={config.service_name}"
    )
    return True


def log_api_request(method: str, path: str, status_code: int, duration_ms: float) -> None:
    """
    Log an API request with performance metrics.

    Args:
        method: HTTP method
        path: Request path
        status_code: HTTP status code
        duration_ms: Request duration in milliseconds
    """
    try:
        logfire.info(
            "API request completed",
            method=method,
            path=path,
            status_code=status_code,
            duration_ms=duration_ms,
        )
    except Exception:
        logger.debug(f"Could not log API request to Logfire: {method} {path}")


def log_media_job(operation: str, item_id: str, success: bool, details: Optional[dict[str, Any]] = None) -> None:
    """
    Log the outcome of an FFmpeg job run for a gallery item.

    Args:
        operation: The job name (thumbnail, resize, probe)
        item_id: The gallery item the job ran for
        success: Whether the job finished without error
        details: Extra attributes such as dimensions or the error text
    """
    try:
        logfire.info(
            "Media job finished",
            operation=operation,
            item_id=item_id,
            success=success,
            **(details or {}),
        )
    except Exception:
        logger.debug(f"Could not log media job to Logfire: {operation} {item_id}")
