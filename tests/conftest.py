import os
import sys
import tempfile
from pathlib import Path

# backend/ holds the importable modules (core, auth, database, main ...)
_REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(_REPO_ROOT / "backend"))

# Settings are read at import time, so the environment must be in place first.
_TMP_DIR = Path(tempfile.mkdtemp(prefix="esports-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP_DIR / 'test.sqlite'}"
os.environ["PASSWORD_HASH_ROUNDS"] = "1000"
os.environ["SESSION_BACKEND"] = "database"
os.environ["ESPORTS_LOG_DIR"] = str(_TMP_DIR / "log")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from core.config import settings  # noqa: E402
from core.security import memory_sessions  # noqa: E402
from database import Base, SessionLocal, engine, init_db  # noqa: E402

JANE = {
    "name": "Jane Doe",
    "email": "jane@example.com",
    "password": "secret123",
    "confirmPassword": "secret123",
}


@pytest.fixture(autouse=True)
def fresh_schema():
    """Every test starts from empty tables and an empty in-memory session store."""
    init_db()
    yield
    Base.metadata.drop_all(bind=engine)
    memory_sessions.clear()


@pytest.fixture()
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client():
    from main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture()
def cookie_name() -> str:
    return settings.session_cookie_name


@pytest.fixture()
def register_jane(client):
    def _register(**overrides):
        payload = {**JANE, **overrides}
        return client.post("/api/register", json=payload)

    return _register
