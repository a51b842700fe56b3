# ---------------------------------------------------------------------------
# Author  : eSports Hub team
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""
Session issuance and lookup.

A session maps an opaque, server-issued token to the four identity fields
``{user_id, email, name, role}``.  The token is the only thing handed to
the client (in a cookie); nothing inside it can be decoded.

Two interchangeable stores are provided:

* :class:`MemorySessionStore`   – a locked dict, for tests and single-process
  development servers.
* :class:`DatabaseSessionStore` – rows in ``user_sessions``, shared by every
  worker that talks to the same database.

Expired sessions are treated exactly like unknown ones.
"""

import secrets
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional, Tuple

from sqlalchemy.orm import Session

from models.session import UserSession


@dataclass(frozen=True)
class SessionData:
    user_id: int
    email: str
    name: str
    role: str


def new_token() -> str:
    return secrets.token_urlsafe(32)


class SessionStore:
    """Interface shared by the concrete stores."""

    def __init__(self, max_age: timedelta):
        self.max_age = max_age

    def create(self, data: SessionData) -> str:
        raise NotImplementedError

    def get(self, token: str) -> Optional[SessionData]:
        raise NotImplementedError

    def delete(self, token: str) -> None:
        raise NotImplementedError


class MemorySessionStore(SessionStore):
    def __init__(self, max_age: timedelta):
        super().__init__(max_age)
        self._lock = threading.Lock()
        self._sessions: Dict[str, Tuple[SessionData, datetime]] = {}

    def create(self, data: SessionData) -> str:
        token = new_token()
        now = datetime.now(timezone.utc)
        with self._lock:
            self._purge_expired(now)
            self._sessions[token] = (data, now + self.max_age)
        return token

    def get(self, token: str) -> Optional[SessionData]:
        if not token:
            return None
        with self._lock:
            entry = self._sessions.get(token)
            if entry is None:
                return None
            data, expires_at = entry
            if expires_at <= datetime.now(timezone.utc):
                del self._sessions[token]
                return None
            return data

    def delete(self, token: str) -> None:
        with self._lock:
            self._sessions.pop(token, None)

    def purge_expired(self) -> int:
        """Drop every expired entry.  Returns the number removed."""
        with self._lock:
            return self._purge_expired(datetime.now(timezone.utc))

    def _purge_expired(self, now: datetime) -> int:
        # caller holds the lock
        expired = [t for t, (_, expires_at) in self._sessions.items() if expires_at <= now]
        for token in expired:
            del self._sessions[token]
        return len(expired)

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


class DatabaseSessionStore(SessionStore):
    """
    Sessions persisted in ``user_sessions``.  Bound to the request's DB
    session; every mutation commits immediately.
    """

    def __init__(self, db: Session, max_age: timedelta):
        super().__init__(max_age)
        self.db = db

    def create(self, data: SessionData) -> str:
        token = new_token()
        self.db.add(
            UserSession(
                token=token,
                user_id=data.user_id,
                email=data.email,
                name=data.name,
                role=data.role,
                expires_at=datetime.now(timezone.utc) + self.max_age,
            )
        )
        self.db.commit()
        return token

    def get(self, token: str) -> Optional[SessionData]:
        if not token:
            return None
        row = (
            self.db.query(UserSession)
            .filter(
                UserSession.token == token,
                UserSession.expires_at > datetime.now(timezone.utc),
            )
            .first()
        )
        if row is None:
            return None
        return SessionData(user_id=row.user_id, email=row.email, name=row.name, role=row.role)

    def delete(self, token: str) -> None:
        self.db.query(UserSession).filter(UserSession.token == token).delete()
        self.db.commit()

    def purge_expired(self) -> int:
        """Delete every expired row.  Returns the number removed."""
        removed = (
            self.db.query(UserSession)
            .filter(UserSession.expires_at <= datetime.now(timezone.utc))
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return removed
