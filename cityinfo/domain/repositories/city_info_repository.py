"""City info repository interface - abstraction for data access."""
from abc import ABC, abstractmethod
from typing import Optional, List, Tuple
from cityinfo.domain.entities.city import City
from cityinfo.domain.entities.point_of_interest import PointOfInterest
from cityinfo.domain.value_objects.pagination import PaginationMetadata


class CityInfoRepository(ABC):
    """Repository interface for cities and their points of interest.

    Entities handed out are detached: changing one has no effect until it is
    passed back through ``update_point_of_interest`` and committed.
    """

    @abstractmethod
    async def list_cities(
        self,
        name: Optional[str],
        search_query: Optional[str],
        page_number: int,
        page_size: int,
    ) -> Tuple[List[City], PaginationMetadata]:
        """List cities ordered by name, filtered and paginated."""
        pass

    @abstractmethod
    async def get_city(self, city_id: int, include_points_of_interest: bool = False) -> Optional[City]:
        """Get city by ID."""
        pass

    @abstractmethod
    async def city_exists(self, city_id: int) -> bool:
        """Check whether a city exists."""
        pass

    @abstractmethod
    async def get_point_of_interest(self, city_id: int, point_of_interest_id: int) -> Optional[PointOfInterest]:
        """Get a point of interest scoped to its city."""
        pass

    @abstractmethod
    async def list_points_of_interest(self, city_id: int) -> List[PointOfInterest]:
        """List points of interest of a city (empty if the city is missing)."""
        pass

    @abstractmethod
    async def get_max_point_of_interest_id(self) -> Optional[int]:
        """Highest point of interest id in the whole store, None if empty."""
        pass

    @abstractmethod
    async def add_point_of_interest(
        self, city_id: int, point_of_interest: PointOfInterest
    ) -> Optional[PointOfInterest]:
        """Attach a new point of interest to a city. None if the city is missing."""
        pass

    @abstractmethod
    async def update_point_of_interest(self, point_of_interest: PointOfInterest) -> None:
        """Push name/description changes of an existing point of interest."""
        pass

    @abstractmethod
    async def remove_point_of_interest(self, point_of_interest: PointOfInterest) -> None:
        """Remove a point of interest from its city and the store."""
        pass

    @abstractmethod
    async def commit(self) -> bool:
        """Persist pending changes. Raises PersistenceFailure if rejected."""
        pass
