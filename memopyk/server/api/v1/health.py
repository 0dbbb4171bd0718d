"""
Health Check Endpoints.

``/health`` reports that the process is up; ``/api/health`` additionally
checks that the database answers.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy import text

from memopyk.core.logging_config import get_logger
from memopyk.server.core import constant
from memopyk.server.core.config import settings
from memopyk.server.services.deps import SessionDep

logger = get_logger(__name__)

router = APIRouter()


def _status_payload(status_text: str) -> dict:
    return {
        "status": status_text,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": constant.API_VERSION,
        "environment": settings.environment,
    }


@router.get(
    "/health",
    summary="Health Check",
    description="Check the operational status of the API server.",
    response_description="Status object.",
)
async def health_check():
    """
    Health check endpoint.

    Returns a simple status indicator to confirm the server is running and reachable.
    """
    return _status_payload("healthy")


@router.get(
    "/api/health",
    summary="Health Check with Database",
    description="Check the API server and its database connection.",
    response_description="Status object including the database state.",
    responses={503: {"description": "Database unreachable"}},
)
async def api_health_check(session: SessionDep):
    """
    Health check endpoint that also runs ``SELECT 1`` against the database.

    Answers 503 with ``status: unhealthy`` when the query fails.
    """
    try:
        await session.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        payload = _status_payload("unhealthy")
        payload.update({"database": "disconnected", "error": str(e)})
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=payload)

    payload = _status_payload("healthy")
    payload["database"] = "connected"
    return payload
