"""
Alembic upgrade run at startup when RUN_MIGRATIONS=1.
"""
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, text

logger = logging.getLogger(__name__)

ALEMBIC_INI = Path(__file__).resolve().parents[2] / "alembic.ini"

# Shared by every API process so only one of them upgrades at a time
MIGRATION_LOCK_KEY = 730512


def alembic_config(database_url: str) -> Config:
    cfg = Config(str(ALEMBIC_INI))
    cfg.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    cfg.attributes["keep_app_logging"] = True
    return cfg


@contextmanager
def migration_lock(database_url: str):
    """Hold a PostgreSQL advisory lock for the duration of the block; no-op elsewhere."""
    if not database_url.startswith("postgresql"):
        yield
        return

    engine = create_engine(database_url)
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT pg_advisory_lock(:key)"), {"key": MIGRATION_LOCK_KEY})
            logger.info("Migration lock acquired")
            try:
                yield
            finally:
                conn.execute(text("SELECT pg_advisory_unlock(:key)"), {"key": MIGRATION_LOCK_KEY})
    finally:
        engine.dispose()


def run_migrations(database_url: Optional[str] = None):
    """Upgrade the database at database_url (DATABASE_URL by default) to head."""
    if database_url is None:
        from jobnest.core.config import DATABASE_URL as database_url

    if not database_url:
        raise ValueError("DATABASE_URL is not set")

    logger.info("Running alembic upgrade head")
    with migration_lock(database_url):
        command.upgrade(alembic_config(database_url), "head")
    logger.info("Migrations complete")
