"""Alembic env: migrates the database the app is configured for.

The engine comes from app.db.session.make_engine, so SQLite migrations run with
the same foreign-key pragma the app uses. ALEMBIC_DATABASE_URL overrides the
app's DATABASE_URL for one-off runs against another store.
"""
from logging.config import fileConfig
import os

from alembic import context

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

from app.core.config import get_settings  # noqa: E402
from app.db.base import Base  # noqa: E402
from app.db.session import make_engine  # noqa: E402

target_metadata = Base.metadata


def migration_settings():
    settings = get_settings()
    override = os.getenv("ALEMBIC_DATABASE_URL")
    if override:
        settings.database_url = override
    return settings


def _configure(**kwargs) -> None:
    context.configure(target_metadata=target_metadata, compare_type=True, **kwargs)


def run_migrations_offline() -> None:
    _configure(
        url=migration_settings().database_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    engine = make_engine(migration_settings())
    try:
        with engine.connect() as connection:
            # SQLite has no ALTER COLUMN / DROP COLUMN on older builds: use batch mode
            _configure(connection=connection, render_as_batch=connection.dialect.name == "sqlite")
            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
