# ---------------------------------------------------------------------------
# Author  : eSports Hub team
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""
Bootstrap script – creates the first admin account.

Public registration always creates role ``user``; this script is the only
way to get an ``admin``.  Run once after the schema exists:
    python bin/seed_admin.py

Reads FIRST_ADMIN_EMAIL, FIRST_ADMIN_PASSWORD and FIRST_ADMIN_NAME from the
environment or etc/app.conf.
"""

import sys
import os

# bin/seed_admin.py  →  ../backend
_PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
_BACKEND_DIR = os.path.join(_PROJECT_ROOT, "backend")
if _BACKEND_DIR not in sys.path:
    sys.path.insert(0, _BACKEND_DIR)

from auth.service import MIN_PASSWORD_LENGTH, is_valid_email, normalize_email  # noqa: E402
from auth.store import CredentialStore  # noqa: E402
from core.config import settings  # noqa: E402
from core.errors import ConflictError  # noqa: E402
from core.security import hash_password  # noqa: E402
from database import SessionLocal, init_db  # noqa: E402


def seed() -> int:
    if not settings.first_admin_email or not settings.first_admin_password:
        print("[seed_admin] FIRST_ADMIN_EMAIL or FIRST_ADMIN_PASSWORD not set – nothing to do.")
        return 1

    email = normalize_email(settings.first_admin_email)
    if not is_valid_email(email):
        print(f"[seed_admin] '{email}' is not a valid email address.")
        return 1
    if len(settings.first_admin_password) < MIN_PASSWORD_LENGTH:
        print(f"[seed_admin] Password must be at least {MIN_PASSWORD_LENGTH} characters long.")
        return 1

    init_db()
    db = SessionLocal()
    try:
        store = CredentialStore(db)
        if store.find_by_email(email):
            print(f"[seed_admin] Account '{email}' already exists – skipping.")
            return 0
        try:
            store.insert(
                name=settings.first_admin_name.strip() or "Administrator",
                email=email,
                password_hash=hash_password(settings.first_admin_password),
                role="admin",
            )
        except ConflictError:
            print(f"[seed_admin] Account '{email}' already exists – skipping.")
            return 0
        print(f"[seed_admin] Admin '{email}' created successfully.")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(seed())
