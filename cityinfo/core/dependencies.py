"""Dependency injection for FastAPI routes.
Follows Dependency Inversion Principle - routes depend on abstractions."""
from functools import lru_cache
from typing import Iterator

from fastapi import Depends

from cityinfo.application.ports.notifier import Notifier
from cityinfo.application.use_cases.manage_points_of_interest import PointOfInterestManager
from cityinfo.config import settings
from cityinfo.core.database_init import seed_store
from cityinfo.core.notifications import NotificationManager
from cityinfo.domain.repositories.city_info_repository import CityInfoRepository
from cityinfo.infrastructure.persistence.db import SessionLocal
from cityinfo.infrastructure.persistence.in_memory_store import CityInfoStore
from cityinfo.infrastructure.persistence.repositories.in_memory_city_info_repository import (
    InMemoryCityInfoRepository,
)
from cityinfo.infrastructure.persistence.repositories.sqlalchemy_city_info_repository import (
    SQLAlchemyCityInfoRepository,
)


@lru_cache()
def get_city_info_store() -> CityInfoStore:
    """The in-memory store, built once per process."""
    store = CityInfoStore()
    if settings.SEED_DATA:
        seed_store(store)
    return store


def get_city_info_repository() -> Iterator[CityInfoRepository]:
    """Get a repository for the current request.

    - Default: in-memory store (fast tests/dev)
    - If USE_DB_REPOS=true: SQLAlchemy repository with a per-request session
    """
    if settings.USE_DB_REPOS:
        session = SessionLocal()
        try:
            yield SQLAlchemyCityInfoRepository(session)
        finally:
            session.close()
    else:
        yield InMemoryCityInfoRepository(get_city_info_store())


@lru_cache()
def get_notifier() -> Notifier:
    """Get notifier instance."""
    return NotificationManager()


def get_point_of_interest_manager(
    repository: CityInfoRepository = Depends(get_city_info_repository),
    notifier: Notifier = Depends(get_notifier),
) -> PointOfInterestManager:
    """Get point of interest manager bound to the request's repository."""
    return PointOfInterestManager(repository=repository, notifier=notifier)
