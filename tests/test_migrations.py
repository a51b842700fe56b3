from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from core.config import settings
from database import engine

_MIGRATIONS = Path(__file__).resolve().parents[1] / "backend" / "migrations"


def _indexes(bind, table):
    return {(ix["name"], tuple(ix["column_names"]), bool(ix["unique"])) for ix in inspect(bind).get_indexes(table)}


def test_migration_matches_create_all(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'migrated.sqlite'}"
    monkeypatch.setattr(settings, "database_url", url)
    cfg = Config()
    cfg.set_main_option("script_location", str(_MIGRATIONS))

    command.upgrade(cfg, "head")

    migrated = create_engine(url)
    try:
        assert set(inspect(migrated).get_table_names()) - {"alembic_version"} == set(inspect(engine).get_table_names())
        for table in ("users", "user_sessions", "newsletter_subscribers"):
            assert _indexes(migrated, table) == _indexes(engine, table)
        assert ("ix_users_email", ("email",), True) in _indexes(migrated, "users")
    finally:
        migrated.dispose()
