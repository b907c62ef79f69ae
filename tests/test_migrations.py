"""
Tests for the startup migration runner.
"""
from sqlalchemy import create_engine, inspect

from jobnest.db.base import Base
import jobnest.db.models  # noqa: F401
from jobnest.db.migrate import run_migrations


def test_upgrade_creates_every_table(tmp_path):
    url = f"sqlite:///{tmp_path / 'jobnest.db'}"

    run_migrations(url)
    # A second run is a no-op at head
    run_migrations(url)

    engine = create_engine(url)
    try:
        tables = set(inspect(engine).get_table_names())
    finally:
        engine.dispose()
    assert set(Base.metadata.tables) <= tables
    assert "alembic_version" in tables
