# ---------------------------------------------------------------------------
# Author  : eSports Hub team
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""
API error taxonomy.

Every error the service reports to a client is an :class:`ApiError`
subclass.  ``main.py`` renders them as ``{"error": <message>}`` with the
class's HTTP status.  Storage and unexpected failures carry a fixed,
generic message; the real cause is only written to the server log.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

from fastapi import status
from sqlalchemy.exc import SQLAlchemyError

from core.logger import logger


class ApiError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "An error occurred"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(ApiError):
    """Malformed or missing input.  User-correctable."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"


class ConflictError(ApiError):
    status_code = status.HTTP_409_CONFLICT
    message = "Email already registered"


class AuthenticationError(ApiError):
    """
    Bad credentials.  Deliberately carries the same message whether the
    email is unknown or the password is wrong.
    """

    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid email or password"


class NotAuthenticatedError(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Not authenticated"


class StorageError(ApiError):
    message = "Database error occurred"


class UnexpectedError(ApiError):
    message = "An error occurred"


@contextmanager
def error_boundary(action: str) -> Iterator[None]:
    """
    Wrap a handler body so that nothing but an :class:`ApiError` escapes.

    Driver errors become :class:`StorageError`, anything else
    :class:`UnexpectedError`.  The original exception is logged with its
    traceback; the client only ever sees the generic message.
    """
    try:
        yield
    except ApiError:
        raise
    except SQLAlchemyError:
        logger.exception("Database error during %s", action)
        raise StorageError() from None
    except Exception:
        logger.exception("Unexpected error during %s", action)
        raise UnexpectedError() from None
