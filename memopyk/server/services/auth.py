"""
Admin session store and login rate limiter.

Both live in process memory: restarting the server logs the admin out and
resets the login counters.
"""

from __future__ import annotations

import logging
import secrets
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional

from memopyk.server.core.config import settings

logger = logging.getLogger(__name__)


@dataclass
class AdminSession:
    user_id: str
    expires_at: float


class SessionStore:
    """Maps random session ids to the admin user they belong to."""

    def __init__(self, ttl_seconds: float, clock: Callable[[], float] = time.time) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._sessions: dict[str, AdminSession] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self, user_id: str) -> str:
        """Start a session and return its id (64 hex characters)."""
        session_id = secrets.token_hex(32)
        self._sessions[session_id] = AdminSession(user_id=user_id, expires_at=self._clock() + self.ttl_seconds)
        self.purge_expired()
        logger.info(f"Admin session created for {user_id}")
        return session_id

    def validate(self, session_id: str) -> Optional[str]:
        """User id of a live session; expired sessions are dropped on lookup."""
        session = self._sessions.get(session_id)
        if session is None:
            return None
        if session.expires_at < self._clock():
            del self._sessions[session_id]
            return None
        return session.user_id

    def destroy(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)

    def purge_expired(self) -> int:
        now = self._clock()
        expired = [sid for sid, session in self._sessions.items() if session.expires_at < now]
        for sid in expired:
            del self._sessions[sid]
        if expired:
            logger.debug(f"Purged {len(expired)} expired admin session(s)")
        return len(expired)

    def clear(self) -> None:
        self._sessions.clear()


@dataclass
class _Attempts:
    count: int
    reset_at: float


class LoginRateLimiter:
    """
    Counts failed logins per client.

    A client that reaches ``max_attempts`` failures is blocked until its
    window (started at its first attempt) runs out.
    """

    def __init__(self, max_attempts: int, window_seconds: float, clock: Callable[[], float] = time.time) -> None:
        self.max_attempts = max_attempts
        self.window_seconds = window_seconds
        self._clock = clock
        self._attempts: dict[str, _Attempts] = {}

    def __len__(self) -> int:
        return len(self._attempts)

    def _current(self, client: str) -> _Attempts:
        now = self._clock()
        attempts = self._attempts.get(client)
        if attempts is None or attempts.reset_at < now:
            attempts = _Attempts(count=0, reset_at=now + self.window_seconds)
            self._attempts[client] = attempts
        return attempts

    def blocked_until(self, client: str) -> Optional[datetime]:
        """When the client may try again, or None if it is not blocked."""
        attempts = self._attempts.get(client)
        if attempts is None or attempts.reset_at < self._clock():
            return None
        if attempts.count >= self.max_attempts:
            return datetime.fromtimestamp(attempts.reset_at, tz=timezone.utc)
        return None

    def record_failure(self, client: str) -> int:
        self.purge_expired()
        attempts = self._current(client)
        attempts.count += 1
        logger.warning(f"Failed admin login from {client} ({attempts.count}/{self.max_attempts})")
        return attempts.count

    def purge_expired(self) -> int:
        """Forget clients whose window has run out."""
        now = self._clock()
        expired = [client for client, attempts in self._attempts.items() if attempts.reset_at < now]
        for client in expired:
            del self._attempts[client]
        if expired:
            logger.debug(f"Purged {len(expired)} expired login window(s)")
        return len(expired)

    def reset(self, client: str) -> None:
        self._attempts.pop(client, None)

    def clear(self) -> None:
        self._attempts.clear()


def password_matches(candidate: str) -> bool:
    return secrets.compare_digest(candidate.encode("utf-8"), settings.admin.password.encode("utf-8"))


_admin = settings.admin
session_store = SessionStore(ttl_seconds=_admin.session_ttl_hours * 60 * 60)
login_rate_limiter = LoginRateLimiter(
    max_attempts=_admin.login_max_attempts,
    window_seconds=_admin.login_window_minutes * 60,
)


def get_session_store() -> SessionStore:
    return session_store


def get_login_rate_limiter() -> LoginRateLimiter:
    return login_rate_limiter
