# ---------------------------------------------------------------------------
# Author  : eSports Hub team
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""
Central security module.  Password hashing, session-cookie handling and the
FastAPI dependencies that resolve the caller's session live here.  No other
module should touch raw crypto or the session cookie directly.

Responsibilities
----------------
1. Password hashing / verification          (passlib pbkdf2_sha256)
2. Session store selection                  (memory | database)
3. Session cookie issue / clear
4. FastAPI dependency guards                (get_current_session)
"""

from datetime import timedelta

from fastapi import Depends, Request, Response
from passlib.exc import PasswordSizeError
from passlib.hash import pbkdf2_sha256 as _pbkdf2  # pure Python, no binary deps
from sqlalchemy.orm import Session

from core.config import settings
from core.errors import NotAuthenticatedError
from core.sessions import DatabaseSessionStore, MemorySessionStore, SessionData, SessionStore
from database import get_db

# ---------------------------------------------------------------------------
# 1.  pbkdf2_sha256 – password hashing
# ---------------------------------------------------------------------------
# passlib embeds a fresh random salt and the round count in the hash string
# ("$pbkdf2-sha256$<rounds>$<salt>$<checksum>"), so verification keeps working
# after the configured round count changes.
# ---------------------------------------------------------------------------


def hash_password(plain: str) -> str:
    """Hash a plaintext password with salted PBKDF2-SHA256."""
    return _pbkdf2.using(rounds=settings.password_hash_rounds).hash(plain)


def verify_password(plain: str, stored_hash: str) -> bool:
    """
    Constant-time verification of a plaintext password against a hash
    produced by :func:`hash_password`.  A secret too long to have been
    hashed can never match.
    """
    try:
        return _pbkdf2.verify(plain, stored_hash)
    except PasswordSizeError:
        return False


# ---------------------------------------------------------------------------
# 2.  Session store selection
# ---------------------------------------------------------------------------

_SESSION_MAX_AGE = timedelta(minutes=settings.session_expire_minutes)

# Only used when session_backend == "memory"; lives as long as the process.
memory_sessions = MemorySessionStore(max_age=_SESSION_MAX_AGE)


def get_session_store(db: Session = Depends(get_db)) -> SessionStore:
    """FastAPI dependency returning the configured session store."""
    if settings.session_backend == "memory":
        return memory_sessions
    return DatabaseSessionStore(db, max_age=_SESSION_MAX_AGE)


# ---------------------------------------------------------------------------
# 3.  Session cookie
# ---------------------------------------------------------------------------


def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=int(_SESSION_MAX_AGE.total_seconds()),
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
        path="/",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.session_cookie_name,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
        path="/",
    )


def get_session_token(request: Request) -> str:
    return request.cookies.get(settings.session_cookie_name, "")


# ---------------------------------------------------------------------------
# 4.  FastAPI dependency guards
# ---------------------------------------------------------------------------


def get_current_session(
    request: Request,
    sessions: SessionStore = Depends(get_session_store),
) -> SessionData:
    """
    Dependency: resolve the session cookie to its :class:`SessionData`.

    Raises 401 if the cookie is missing, unknown or expired.
    """
    data = sessions.get(get_session_token(request))
    if data is None:
        raise NotAuthenticatedError()
    return data
