"""SQLAlchemy implementation of CityInfoRepository."""
import logging
from typing import Optional, List, Tuple

from sqlalchemy import func, or_, and_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from cityinfo.application.services.pagination import build_metadata, page_window
from cityinfo.core.exceptions import PersistenceFailure
from cityinfo.domain.entities.city import City as CityEntity
from cityinfo.domain.entities.point_of_interest import PointOfInterest as PointOfInterestEntity
from cityinfo.domain.repositories.city_info_repository import CityInfoRepository
from cityinfo.domain.value_objects.pagination import PaginationMetadata
from cityinfo.infrastructure.persistence import models

logger = logging.getLogger(__name__)


def _to_poi_entity(row: models.PointOfInterest) -> PointOfInterestEntity:
    """Map ORM model to domain entity."""
    return PointOfInterestEntity(
        id=row.id,
        city_id=row.city_id,
        name=row.name,
        description=row.description,
    )


def _to_city_entity(row: models.City, include_points_of_interest: bool = False) -> CityEntity:
    children = []
    if include_points_of_interest:
        children = [_to_poi_entity(p) for p in row.points_of_interest]
    return CityEntity(
        id=row.id,
        name=row.name,
        description=row.description,
        points_of_interest=children,
    )


class SQLAlchemyCityInfoRepository(CityInfoRepository):
    """City info repository using SQLAlchemy.

    Mutations are staged on the session and written by ``commit``.
    """

    def __init__(self, session: Session):
        self.session = session

    async def list_cities(
        self,
        name: Optional[str],
        search_query: Optional[str],
        page_number: int,
        page_size: int,
    ) -> Tuple[List[CityEntity], PaginationMetadata]:
        skip, take = page_window(page_number, page_size)
        query = self.session.query(models.City)

        if name and name.strip():
            query = query.filter(models.City.name == name.strip())

        if search_query and search_query.strip():
            search_query = search_query.strip()
            query = query.filter(
                or_(
                    models.City.name.contains(search_query, autoescape=True),
                    and_(
                        models.City.description.isnot(None),
                        models.City.description.contains(search_query, autoescape=True),
                    ),
                )
            )

        total_item_count = query.count()
        rows = (
            query.order_by(models.City.name)
            .offset(skip)
            .limit(take)
            .all()
        )
        return [_to_city_entity(r) for r in rows], build_metadata(total_item_count, page_number, page_size)

    async def get_city(self, city_id: int, include_points_of_interest: bool = False) -> Optional[CityEntity]:
        query = self.session.query(models.City).filter(models.City.id == city_id)
        if include_points_of_interest:
            query = query.options(selectinload(models.City.points_of_interest))
        row = query.first()
        return _to_city_entity(row, include_points_of_interest) if row else None

    async def city_exists(self, city_id: int) -> bool:
        return (
            self.session.query(models.City.id)
            .filter(models.City.id == city_id)
            .first()
        ) is not None

    async def get_point_of_interest(
        self, city_id: int, point_of_interest_id: int
    ) -> Optional[PointOfInterestEntity]:
        row = (
            self.session.query(models.PointOfInterest)
            .filter(
                models.PointOfInterest.id == point_of_interest_id,
                models.PointOfInterest.city_id == city_id,
            )
            .first()
        )
        return _to_poi_entity(row) if row else None

    async def list_points_of_interest(self, city_id: int) -> List[PointOfInterestEntity]:
        rows = (
            self.session.query(models.PointOfInterest)
            .filter(models.PointOfInterest.city_id == city_id)
            .order_by(models.PointOfInterest.id)
            .all()
        )
        return [_to_poi_entity(r) for r in rows]

    async def get_max_point_of_interest_id(self) -> Optional[int]:
        return self.session.query(func.max(models.PointOfInterest.id)).scalar()

    async def add_point_of_interest(
        self, city_id: int, point_of_interest: PointOfInterestEntity
    ) -> Optional[PointOfInterestEntity]:
        city = self.session.get(models.City, city_id)
        if city is None:
            logger.warning(
                f"Point of interest {point_of_interest.id} not added: city {city_id} does not exist"
            )
            return None

        if not point_of_interest.is_valid() or point_of_interest.city_id != city_id:
            raise ValueError("Invalid point of interest")

        row = models.PointOfInterest(
            id=point_of_interest.id,
            name=point_of_interest.name,
            description=point_of_interest.description,
        )
        city.points_of_interest.append(row)
        self._flush()
        return _to_poi_entity(row)

    async def update_point_of_interest(self, point_of_interest: PointOfInterestEntity) -> None:
        row = self.session.get(models.PointOfInterest, point_of_interest.id)
        if not row or row.city_id != point_of_interest.city_id:
            raise ValueError("Point of interest not found")
        row.name = point_of_interest.name
        row.description = point_of_interest.description
        self._flush()

    async def remove_point_of_interest(self, point_of_interest: PointOfInterestEntity) -> None:
        row = self.session.get(models.PointOfInterest, point_of_interest.id)
        if row is not None:
            self.session.delete(row)
            self._flush()

    async def commit(self) -> bool:
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Commit failed: {e}")
            raise PersistenceFailure("Saving changes failed") from e
        return True

    def _flush(self) -> None:
        # Staged writes must be visible to later queries in the same unit of work
        try:
            self.session.flush()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Flush failed: {e}")
            raise PersistenceFailure("Staging changes failed") from e
