"""
Create all tables directly from the models.

Used for local development and tests; deployed databases are managed by
Alembic (see jobnest.db.migrate).
"""
import logging

from sqlalchemy.engine import Engine

from jobnest.db.base import Base
import jobnest.db.models  # noqa: F401  (registers every model on Base.metadata)

logger = logging.getLogger(__name__)


def init_db(bind: Engine) -> None:
    Base.metadata.create_all(bind=bind)
    logger.info("Database tables created")
