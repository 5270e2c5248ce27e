# File: tests/conftest.py

import os

# Must be set before anything under app/ reads the settings.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest

from app.core.security import create_access_token
from app.db.init_db import drop_db, init_db
from app.db.session import SessionLocal


@pytest.fixture(autouse=True)
def fresh_schema():
    init_db()
    yield
    drop_db()


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def auth_headers():
    token = create_access_token("1")
    return {"Authorization": f"Bearer {token}"}
