"""
Pytest configuration and shared fixtures for backend tests.

This module provides test fixtures for:
- In-memory stores and repositories
- Database sessions (in-memory SQLite for fast tests)
- FastAPI test client
- A recording notifier
"""

import os
from typing import Generator, List, Tuple

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from cityinfo.application.use_cases.manage_points_of_interest import PointOfInterestManager
from cityinfo.core.database_init import initialize_database, seed_store
from cityinfo.core.dependencies import get_city_info_repository, get_notifier
from cityinfo.domain.entities.city import City
from cityinfo.domain.entities.point_of_interest import PointOfInterest
from cityinfo.infrastructure.persistence.db import Base
from cityinfo.infrastructure.persistence.in_memory_store import CityInfoStore
from cityinfo.infrastructure.persistence.repositories.in_memory_city_info_repository import (
    InMemoryCityInfoRepository,
)
from cityinfo.infrastructure.persistence.repositories.sqlalchemy_city_info_repository import (
    SQLAlchemyCityInfoRepository,
)
from cityinfo.main import app


class RecordingNotifier:
    """Notifier that keeps every message it was asked to send."""

    def __init__(self):
        self.messages: List[Tuple[str, str]] = []

    async def notify(self, subject: str, body: str) -> None:
        self.messages.append((subject, body))


class FailingNotifier:
    """Notifier whose channel is down."""

    def __init__(self):
        self.calls = 0

    async def notify(self, subject: str, body: str) -> None:
        self.calls += 1
        raise ConnectionError("mail server unreachable")


# ==============================================================================
# IN-MEMORY FIXTURES
# ==============================================================================

@pytest.fixture
def store() -> CityInfoStore:
    """Store loaded with the seed cities (ids 1-3, points of interest 1-6)."""
    return seed_store(CityInfoStore())


@pytest.fixture
def empty_store() -> CityInfoStore:
    """Store with one city and no points of interest."""
    store = CityInfoStore()
    store.add_city(City(id=1, name="Ghent", description="No landmarks yet."))
    return store


@pytest.fixture
def repository(store) -> InMemoryCityInfoRepository:
    return InMemoryCityInfoRepository(store)


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def failing_notifier() -> FailingNotifier:
    return FailingNotifier()


@pytest.fixture
def manager(repository, notifier) -> PointOfInterestManager:
    return PointOfInterestManager(repository=repository, notifier=notifier)


@pytest.fixture
def search_store() -> CityInfoStore:
    """Store with cities chosen for filter and search tests."""
    store = CityInfoStore()
    store.add_city(City(id=1, name="Paris", description="The one with that big tower."))
    store.add_city(City(id=2, name="Paris 2", description="Not the real one."))
    store.add_city(City(id=3, name="London", description="Home of Tower bridge."))
    store.add_city(City(id=4, name="Bridgetown", description=None))
    store.add_city(City(id=5, name="Antwerp", description=None))
    return store


# ==============================================================================
# DATABASE FIXTURES
# ==============================================================================

@pytest.fixture(scope="function")
def test_db_engine():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Enable foreign key support for SQLite
    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    yield engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def test_session_factory(test_db_engine):
    """Session factory bound to a seeded test database."""
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=test_db_engine
    )
    assert initialize_database(bind=test_db_engine, session_factory=TestingSessionLocal)
    return TestingSessionLocal


@pytest.fixture(scope="function")
def test_db_session(test_session_factory) -> Generator[Session, None, None]:
    """Create a database session for testing."""
    session = test_session_factory()

    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def sql_repository(test_db_session) -> SQLAlchemyCityInfoRepository:
    return SQLAlchemyCityInfoRepository(test_db_session)


# ==============================================================================
# API FIXTURES
# ==============================================================================

@pytest.fixture(scope="function")
def client(store, notifier) -> Generator[TestClient, None, None]:
    """Create a FastAPI test client over a fresh seeded store."""

    def override_repository():
        yield InMemoryCityInfoRepository(store)

    app.dependency_overrides[get_city_info_repository] = override_repository
    app.dependency_overrides[get_notifier] = lambda: notifier

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# ==============================================================================
# TEST DATA FACTORIES
# ==============================================================================

@pytest.fixture
def sample_point_of_interest() -> PointOfInterest:
    return PointOfInterest(id=99, city_id=1, name="High Line", description="Elevated park.")


@pytest.fixture(autouse=True)
def reset_environment():
    """Reset environment variables after each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# ==============================================================================
# MARKERS
# ==============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: Mark test as an integration test"
    )
