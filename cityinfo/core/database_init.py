"""Database initialization - runs on backend startup."""
import logging

from sqlalchemy.exc import SQLAlchemyError

from cityinfo.domain.entities.city import City
from cityinfo.infrastructure.persistence import models
from cityinfo.infrastructure.persistence.db import Base, SessionLocal, engine
from cityinfo.infrastructure.persistence.in_memory_store import CityInfoStore
from cityinfo.infrastructure.persistence.seed_data import build_seed_cities

logger = logging.getLogger(__name__)


def seed_store(store: CityInfoStore) -> CityInfoStore:
    """Load the seed cities into an in-memory store."""
    for city in build_seed_cities():
        store.add_city(city)
    return store


def _to_row(city: City) -> models.City:
    return models.City(
        id=city.id,
        name=city.name,
        description=city.description,
        points_of_interest=[
            models.PointOfInterest(id=p.id, name=p.name, description=p.description)
            for p in city.points_of_interest
        ],
    )


def initialize_database(bind=None, session_factory=None, seed: bool = True) -> bool:
    """Create tables and load the seed data into an empty database.

    Returns:
        bool: True on success, False if the database could not be prepared
    """
    bind = bind or engine
    session_factory = session_factory or SessionLocal

    try:
        Base.metadata.create_all(bind=bind)
    except SQLAlchemyError as e:
        logger.error(f"Error creating tables: {e}")
        return False

    if not seed:
        return True

    session = session_factory()
    try:
        if session.query(models.City).count() > 0:
            logger.debug("Cities already present, skipping seed")
            return True
        session.add_all([_to_row(c) for c in build_seed_cities()])
        session.commit()
        logger.info("Database schema initialized and seeded")
        return True
    except SQLAlchemyError as e:
        logger.error(f"Error seeding database: {e}")
        session.rollback()
        return False
    finally:
        session.close()
