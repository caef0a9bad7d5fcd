"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import Settings
from src.db.schema import Base
from src.main import create_app

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """HTTP client against a fresh app with its own in-memory game store."""
    app = create_app(Settings(static_dir="does-not-exist"))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sql_client() -> Generator[TestClient, None, None]:
    """Same as `client`, but the app stores its games through SQLAlchemy (in-memory SQLite)."""
    app = create_app(
        Settings(
            static_dir="does-not-exist",
            game_store="sql",
            database_url="sqlite:///:memory:",
        )
    )
    with TestClient(app) as test_client:
        yield test_client
