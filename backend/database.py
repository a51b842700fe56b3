# ---------------------------------------------------------------------------
# Author  : eSports Hub team
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""
SQLAlchemy engine, session factory, declarative base, the FastAPI
dependency that provides a DB session per request, and the idempotent
schema bootstrap run at startup.
"""

from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, declarative_base

from core.config import settings

_url = make_url(settings.database_url)
_connect_args = {}

if _url.get_backend_name() == "sqlite":
    # The pool hands connections to whichever worker thread serves the request
    _connect_args["check_same_thread"] = False
    if _url.database and _url.database != ":memory:":
        Path(_url.database).parent.mkdir(parents=True, exist_ok=True)

# pool_pre_ping keeps idle connections alive across MySQL's wait_timeout
engine = create_engine(settings.database_url, pool_pre_ping=True, connect_args=_connect_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """
    FastAPI dependency.  Yields a session for the duration of the request,
    then closes it.  Use with Depends(get_db).
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create every table that does not exist yet.  Safe to call repeatedly."""
    # Import every ORM model so that Base.metadata knows about all tables.
    import models.user        # noqa: F401
    import models.session     # noqa: F401
    import models.content     # noqa: F401
    import models.submission  # noqa: F401

    Base.metadata.create_all(bind=engine)
