"""Startup schema bootstrap: create missing tables, patch older ones."""
import logging

from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine

from app.db.base import Base

logger = logging.getLogger(__name__)


def _add_column_if_missing(engine: Engine, table: str, column: str, definition: str) -> bool:
    columns = {c["name"] for c in inspect(engine).get_columns(table)}
    if column in columns:
        return False
    with engine.begin() as conn:
        conn.execute(text(f"ALTER TABLE {table} ADD COLUMN {column} {definition}"))
    logger.info("Added %s column to %s table", column, table)
    return True


def init_db(engine: Engine) -> None:
    """Create tables if absent. Safe to run on every startup."""
    Base.metadata.create_all(bind=engine)
    # accounts tables created before roles existed
    _add_column_if_missing(engine, "accounts", "role", "VARCHAR(50) DEFAULT 'student'")
    logger.info("Database tables initialized")
