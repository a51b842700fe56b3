# ---------------------------------------------------------------------------
# Author  : eSports Hub team
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""
Registration and login.

Both flows validate the request shape completely before the first storage
access, then talk to the :class:`CredentialStore` and finally establish a
session.  They return a sanitised :class:`UserView` and the session token;
turning the token into a cookie is the router's job.

Emails are trimmed and lower-cased before anything else touches them, so
``Jane@Example.com`` and ``jane@example.com`` are the same account.
"""

import re
from typing import Optional, Tuple

from auth.schemas import LoginRequest, RegisterRequest, UserView
from auth.store import CredentialStore
from core.errors import AuthenticationError, ConflictError, ValidationError
from core.logger import logger
from core.security import hash_password, verify_password
from core.sessions import SessionData, SessionStore
from models.user import User

MIN_PASSWORD_LENGTH = 8
# passlib refuses longer secrets (passlib.exc.PasswordSizeError)
MAX_PASSWORD_LENGTH = 4096

_EMAIL_RE = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9-]+(\.[A-Za-z0-9-]+)*\.[A-Za-z]{2,}$")

# Checked in this order; the first missing one is reported.
_REGISTER_FIELDS = (
    ("name", "Name"),
    ("email", "Email"),
    ("password", "Password"),
    ("confirm_password", "ConfirmPassword"),
)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def is_valid_email(email: str) -> bool:
    return bool(_EMAIL_RE.match(email))


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_registration(body: RegisterRequest) -> Tuple[str, str, str]:
    """
    Return ``(name, email, password)`` ready for storage, or raise
    :class:`ValidationError` describing the first problem found.
    """
    for attr, label in _REGISTER_FIELDS:
        if _blank(getattr(body, attr)):
            raise ValidationError(f"{label} is required")

    name = body.name.strip()
    email = normalize_email(body.email)

    if not is_valid_email(email):
        raise ValidationError("Invalid email format")
    if len(body.password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")
    if len(body.password) > MAX_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at most {MAX_PASSWORD_LENGTH} characters long")
    if body.password != body.confirm_password:
        raise ValidationError("Passwords do not match")

    return name, email, body.password


def validate_login(body: LoginRequest) -> Tuple[str, str]:
    if _blank(body.email) or not body.password:
        raise ValidationError("Email and password are required")

    email = normalize_email(body.email)
    if not is_valid_email(email):
        raise ValidationError("Invalid email format")
    return email, body.password


def _establish_session(sessions: SessionStore, user: User) -> str:
    return sessions.create(
        SessionData(user_id=user.id, email=user.email, name=user.name, role=user.role)
    )


def register(body: RegisterRequest, store: CredentialStore, sessions: SessionStore) -> Tuple[UserView, str]:
    name, email, password = validate_registration(body)

    if store.find_by_email(email) is not None:
        raise ConflictError()

    user = store.insert(name=name, email=email, password_hash=hash_password(password))
    token = _establish_session(sessions, user)
    logger.info("User registered user_id=%s", user.id)
    return UserView.model_validate(user), token


def login(body: LoginRequest, store: CredentialStore, sessions: SessionStore) -> Tuple[UserView, str]:
    email, password = validate_login(body)

    user = store.find_by_email(email)
    # Unified failure path – no information leaks about whether the email exists
    if user is None or not verify_password(password, user.password_hash):
        logger.info("Failed login attempt")
        raise AuthenticationError()

    store.touch_last_login(user.id)
    token = _establish_session(sessions, user)
    logger.info("User logged in user_id=%s", user.id)
    return UserView.model_validate(user), token
