"""In-memory implementation of CityInfoRepository.
Follows Liskov Substitution Principle - can replace any CityInfoRepository."""
import logging
from dataclasses import replace
from typing import Optional, List, Tuple

from cityinfo.application.services.pagination import paginate
from cityinfo.domain.entities.city import City
from cityinfo.domain.entities.point_of_interest import PointOfInterest
from cityinfo.domain.repositories.city_info_repository import CityInfoRepository
from cityinfo.domain.value_objects.pagination import PaginationMetadata
from cityinfo.infrastructure.persistence.in_memory_store import CityInfoStore

logger = logging.getLogger(__name__)


class InMemoryCityInfoRepository(CityInfoRepository):
    """In-memory implementation over a shared CityInfoStore.

    Changes are applied to the store immediately, so ``commit`` has nothing
    left to do. Entities are copied on the way out.
    """

    def __init__(self, store: CityInfoStore):
        self._store = store

    async def list_cities(
        self,
        name: Optional[str],
        search_query: Optional[str],
        page_number: int,
        page_size: int,
    ) -> Tuple[List[City], PaginationMetadata]:
        """List cities ordered by name, filtered and paginated."""
        cities = self._store.cities()

        if name and name.strip():
            name = name.strip()
            cities = [c for c in cities if c.name == name]

        if search_query and search_query.strip():
            search_query = search_query.strip()
            cities = [c for c in cities if c.matches_search(search_query)]

        cities.sort(key=lambda c: c.name)
        page, metadata = paginate(cities, page_number, page_size)
        return [self._copy_city(c, False) for c in page], metadata

    async def get_city(self, city_id: int, include_points_of_interest: bool = False) -> Optional[City]:
        """Get city by ID."""
        city = self._store.get_city(city_id)
        return self._copy_city(city, include_points_of_interest) if city else None

    async def city_exists(self, city_id: int) -> bool:
        return self._store.get_city(city_id) is not None

    async def get_point_of_interest(self, city_id: int, point_of_interest_id: int) -> Optional[PointOfInterest]:
        point_of_interest = self._store.find_point_of_interest(point_of_interest_id)
        if point_of_interest is None or point_of_interest.city_id != city_id:
            return None
        return replace(point_of_interest)

    async def list_points_of_interest(self, city_id: int) -> List[PointOfInterest]:
        city = self._store.get_city(city_id)
        if city is None:
            return []
        return [replace(p) for p in city.points_of_interest]

    async def get_max_point_of_interest_id(self) -> Optional[int]:
        return max((p.id for p in self._store.points_of_interest()), default=None)

    async def add_point_of_interest(
        self, city_id: int, point_of_interest: PointOfInterest
    ) -> Optional[PointOfInterest]:
        city = self._store.get_city(city_id)
        if city is None:
            logger.warning(
                f"Point of interest {point_of_interest.id} not added: city {city_id} does not exist"
            )
            return None

        if not point_of_interest.is_valid() or point_of_interest.city_id != city_id:
            raise ValueError("Invalid point of interest")

        # Check for duplicate id anywhere in the store
        if self._store.find_point_of_interest(point_of_interest.id) is not None:
            raise ValueError(f"Point of interest with id {point_of_interest.id} already exists")

        city.points_of_interest.append(replace(point_of_interest))
        return point_of_interest

    async def update_point_of_interest(self, point_of_interest: PointOfInterest) -> None:
        stored = self._store.find_point_of_interest(point_of_interest.id)
        if stored is None or stored.city_id != point_of_interest.city_id:
            raise ValueError("Point of interest not found")
        stored.name = point_of_interest.name
        stored.description = point_of_interest.description

    async def remove_point_of_interest(self, point_of_interest: PointOfInterest) -> None:
        city = self._store.get_city(point_of_interest.city_id)
        if city is None:
            return
        city.points_of_interest = [p for p in city.points_of_interest if p.id != point_of_interest.id]

    async def commit(self) -> bool:
        return True

    @staticmethod
    def _copy_city(city: City, include_points_of_interest: bool) -> City:
        children = [replace(p) for p in city.points_of_interest] if include_points_of_interest else []
        return City(
            id=city.id,
            name=city.name,
            description=city.description,
            points_of_interest=children,
        )
