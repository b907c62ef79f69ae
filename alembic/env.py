from logging.config import fileConfig

from sqlalchemy import engine_from_config, pool

from alembic import context

from jobnest.core import config as app_config
from jobnest.db.base import Base
import jobnest.db.models  # noqa: F401

config = context.config

# run_migrations() keeps the logging set up by setup_logging()
if config.config_file_name is not None and not config.attributes.get("keep_app_logging"):
    fileConfig(config.config_file_name, disable_existing_loggers=False)

# run_migrations() sets the URL explicitly; the CLI falls back to DATABASE_URL
if not config.get_main_option("sqlalchemy.url"):
    config.set_main_option("sqlalchemy.url", app_config.DATABASE_URL.replace("%", "%%"))

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """Emit SQL to stdout without a database connection."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            render_as_batch=connection.dialect.name == "sqlite",
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
