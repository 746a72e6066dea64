from __future__ import annotations

import os
import tempfile

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import delete

# Settings are read at import time, so configure the environment first.
_DB_DIR = tempfile.mkdtemp(prefix="careerfair-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite:///{_DB_DIR}/careerfair.db")
os.environ.setdefault("ENV", "local")
os.environ.setdefault("JWT_SECRET", "test_jwt_secret_32_chars_minimum")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("LEAVE_BLOCK_WINDOW_HOURS", "24")

from careerfair.db import SessionLocal, init_db  # noqa: E402
from careerfair.main import app  # noqa: E402
from careerfair.models import Base  # noqa: E402

init_db()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def clean_db():
    # Children before parents so foreign keys never dangle.
    db = SessionLocal()
    try:
        for table in reversed(Base.metadata.sorted_tables):
            db.execute(delete(table))
        db.commit()
    finally:
        db.close()
    yield
