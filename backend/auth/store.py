# ---------------------------------------------------------------------------
# Author  : eSports Hub team
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""
Credential store – the only code that reads or writes the ``users`` table.

Uniqueness of ``email`` is guaranteed by the table's unique index, not by
the read-before-insert in the registration flow.  When two registrations
race, the loser's INSERT fails with an IntegrityError which is translated
to :class:`ConflictError` here.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from core.errors import ConflictError, StorageError
from core.logger import logger
from models.user import User


class CredentialStore:
    def __init__(self, db: Session):
        self.db = db

    def find_by_email(self, email: str) -> Optional[User]:
        try:
            return self.db.query(User).filter(User.email == email).first()
        except SQLAlchemyError:
            logger.exception("User lookup failed")
            raise StorageError() from None

    def insert(self, name: str, email: str, password_hash: str, role: str = "user") -> User:
        user = User(name=name, email=email, password_hash=password_hash, role=role)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.info("Rejected duplicate registration")
            raise ConflictError() from None
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("User insert failed")
            raise StorageError() from None
        self.db.refresh(user)
        return user

    def touch_last_login(self, user_id: int) -> None:
        try:
            self.db.query(User).filter(User.id == user_id).update(
                {User.last_login: datetime.now(timezone.utc)}
            )
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("last_login update failed for user_id=%s", user_id)
            raise StorageError() from None
