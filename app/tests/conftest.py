import os

os.environ.setdefault("HTTP_SERVER_USER", "myuser")
os.environ.setdefault("HTTP_SERVER_PASSWORD", "mypass")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.db.Models.models import Base, URLMapping
from app.db.Connection import database
from app.db.repository import URLStorage


# Create in-memory SQLite database for testing
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def storage():
    """Creates a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    try:
        yield URLStorage(TestingSessionLocal)
    finally:
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(storage):
    """Creates a test client with overridden storage dependency."""
    app.dependency_overrides[database.get_storage] = lambda: storage
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth():
    return ("myuser", "mypass")


@pytest.fixture
def count_rows():
    def _count():
        with TestingSessionLocal() as session:
            return session.query(URLMapping).count()
    return _count


@pytest.fixture
def db_engine():
    return engine
