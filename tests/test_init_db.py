import pytest
from sqlalchemy import create_engine, inspect, text
from sqlalchemy.pool import StaticPool

from app.db.init_db import init_db


@pytest.fixture()
def engine():
    eng = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield eng
    eng.dispose()


def _columns(engine, table):
    return {c["name"] for c in inspect(engine).get_columns(table)}


def test_creates_tables_on_empty_store(engine):
    init_db(engine)

    tables = set(inspect(engine).get_table_names())
    assert {"accounts", "progress"} <= tables
    assert "role" in _columns(engine, "accounts")
    assert "account_id" in _columns(engine, "progress")


def test_adds_role_to_legacy_accounts_table(engine):
    with engine.begin() as conn:
        conn.execute(
            text(
                "CREATE TABLE accounts ("
                "id INTEGER PRIMARY KEY AUTOINCREMENT, "
                "name VARCHAR(255) NOT NULL, "
                "email VARCHAR(255) NOT NULL UNIQUE, "
                "password_hash VARCHAR(255) NOT NULL, "
                "created_at DATETIME, updated_at DATETIME)"
            )
        )
        conn.execute(text("INSERT INTO accounts (name, email, password_hash) VALUES ('Old', 'old@example.com', 'x')"))

    init_db(engine)

    assert "role" in _columns(engine, "accounts")
    with engine.connect() as conn:
        assert conn.execute(text("SELECT role FROM accounts")).scalar_one() == "student"


def test_is_idempotent(engine):
    init_db(engine)
    init_db(engine)

    assert "role" in _columns(engine, "accounts")
