"""
Admin Authentication Endpoints.

A single configured password unlocks the admin panel. A successful login
sets an http-only session cookie that ``require_admin`` checks on every
admin endpoint.
"""

from fastapi import APIRouter, HTTPException, Request, Response, status

from memopyk.core.logging_config import get_logger
from memopyk.core.models.io import AdminUser, LoginRequest, LoginResponse, MessageResponse, VerifyResponse
from memopyk.server.core import constant
from memopyk.server.core.config import settings
from memopyk.server.services.auth import password_matches
from memopyk.server.services.deps import AdminDep, RateLimiterDep, SessionStoreDep

logger = get_logger(__name__)

router = APIRouter(tags=["auth"])


def _client_key(request: Request) -> str:
    return request.client.host if request.client else "unknown"


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Admin Login",
    description="Exchange the admin password for a session cookie.",
    responses={
        401: {"description": "Wrong password"},
        429: {"description": "Too many failed attempts from this client"},
    },
)
async def login(
    payload: LoginRequest,
    request: Request,
    response: Response,
    store: SessionStoreDep,
    limiter: RateLimiterDep,
) -> LoginResponse:
    """
    Log in to the admin panel.

    Failed attempts are counted per client address; once the limit is reached
    the client gets 429 until its window resets.

    - **password**: The admin password.
    """
    client = _client_key(request)
    reset_at = limiter.blocked_until(client)
    if reset_at is not None:
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail={
                "message": "Too many login attempts. Please try again later.",
                "resetAt": reset_at.isoformat(),
            },
        )

    if not password_matches(payload.password):
        limiter.record_failure(client)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid password")

    limiter.reset(client)
    session_id = store.create(constant.ADMIN_USER_ID)
    admin = settings.admin
    response.set_cookie(
        key=admin.session_cookie,
        value=session_id,
        max_age=admin.session_ttl_hours * 60 * 60,
        httponly=True,
        secure=admin.cookie_secure,
        samesite="lax",
    )
    return LoginResponse(user=AdminUser(id=constant.ADMIN_USER_ID))


@router.post(
    "/logout",
    response_model=MessageResponse,
    summary="Admin Logout",
    description="Destroy the current session and clear the cookie.",
)
async def logout(request: Request, response: Response, store: SessionStoreDep) -> MessageResponse:
    session_id = request.cookies.get(settings.admin.session_cookie)
    if session_id:
        store.destroy(session_id)
    response.delete_cookie(settings.admin.session_cookie)
    return MessageResponse(message="Logged out successfully")


@router.get(
    "/verify",
    response_model=VerifyResponse,
    summary="Verify Session",
    description="Check that the session cookie belongs to a live admin session.",
    responses={401: {"description": "Missing, unknown or expired session"}},
)
async def verify(user_id: AdminDep) -> VerifyResponse:
    return VerifyResponse(user=AdminUser(id=user_id))
