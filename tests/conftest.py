import os
import sys
from pathlib import Path

# Configure before app imports: settings are read when app.db.session and
# app.core.security are first imported.
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ.setdefault("LOG_LEVEL", "WARNING")

root_dir = Path(__file__).resolve().parents[1]
if str(root_dir) not in sys.path:
    sys.path.insert(0, str(root_dir))

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.db import session as session_module  # noqa: E402
from app.db.base import Base  # noqa: E402
from app.main import create_app  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_schema():
    # every test starts from an empty store so the first-account rule is predictable
    Base.metadata.drop_all(bind=session_module.engine)
    Base.metadata.create_all(bind=session_module.engine)
    yield


@pytest.fixture()
def db():
    with session_module.SessionLocal() as session:
        yield session


@pytest.fixture()
def client():
    with TestClient(create_app()) as c:
        yield c


@pytest.fixture()
def register_user(client):
    def _register(name="Ada", email="ada@example.com", password="secret1"):
        r = client.post("/api/auth/register", json={"name": name, "email": email, "password": password})
        assert r.status_code == 201, r.text
        return r.json()["user"]

    return _register
