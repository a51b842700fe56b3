# ---------------------------------------------------------------------------
# Author  : eSports Hub team
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""
Auth endpoints – register, login, current session, logout.

Security notes
--------------
* Login returns the *same* error message whether the email doesn't exist or
  the password is wrong.  This prevents user-enumeration attacks.
* No response model carries ``password_hash``; users are always rendered
  through ``UserView``.
* On success the session token is set as an HttpOnly cookie and never
  appears in the JSON body.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from auth import service
from auth.schemas import (
    AuthResponse,
    LoginRequest,
    MeResponse,
    MessageResponse,
    RegisterRequest,
    UserView,
)
from auth.store import CredentialStore
from core.errors import error_boundary
from core.security import (
    clear_session_cookie,
    get_current_session,
    get_session_store,
    get_session_token,
    set_session_cookie,
)
from core.sessions import SessionData, SessionStore
from database import get_db

router = APIRouter(prefix="/api", tags=["auth"])


def _preflight() -> Response:
    return Response(status_code=status.HTTP_200_OK)


# ---------------------------------------------------------------------------
# POST /api/register
# ---------------------------------------------------------------------------


@router.post("/register", response_model=AuthResponse)
def register(
    response: Response,
    body: Optional[RegisterRequest] = None,
    db: Session = Depends(get_db),
    sessions: SessionStore = Depends(get_session_store),
):
    """Create an account with role ``user`` and sign the caller in."""
    with error_boundary("registration"):
        user, token = service.register(body or RegisterRequest(), CredentialStore(db), sessions)
    set_session_cookie(response, token)
    return AuthResponse(message="Registration successful", user=user)


@router.options("/register", include_in_schema=False)
def register_preflight():
    return _preflight()


# ---------------------------------------------------------------------------
# POST /api/login
# ---------------------------------------------------------------------------


@router.post("/login", response_model=AuthResponse)
def login(
    response: Response,
    body: Optional[LoginRequest] = None,
    db: Session = Depends(get_db),
    sessions: SessionStore = Depends(get_session_store),
):
    """Verify credentials, stamp ``last_login`` and sign the caller in."""
    with error_boundary("login"):
        user, token = service.login(body or LoginRequest(), CredentialStore(db), sessions)
    set_session_cookie(response, token)
    return AuthResponse(message="Login successful", user=user)


@router.options("/login", include_in_schema=False)
def login_preflight():
    return _preflight()


# ---------------------------------------------------------------------------
# GET /api/me
# ---------------------------------------------------------------------------


@router.get("/me", response_model=MeResponse)
def me(current: SessionData = Depends(get_current_session)):
    """Return the identity recorded in the caller's session (no secrets)."""
    return MeResponse(
        user=UserView(id=current.user_id, name=current.name, email=current.email, role=current.role)
    )


# ---------------------------------------------------------------------------
# POST /api/logout
# ---------------------------------------------------------------------------


@router.post("/logout", response_model=MessageResponse)
def logout(
    request: Request,
    response: Response,
    sessions: SessionStore = Depends(get_session_store),
):
    """Drop the caller's session, if any.  Always succeeds."""
    token = get_session_token(request)
    if token:
        with error_boundary("logout"):
            sessions.delete(token)
    clear_session_cookie(response)
    return MessageResponse(message="Logout successful")
