"""Process-owned in-memory store of cities and their points of interest.

One instance is built at startup and handed to the in-memory repository;
nothing here is module-level state.
"""
from typing import Dict, Iterator, List, Optional

from cityinfo.domain.entities.city import City
from cityinfo.domain.entities.point_of_interest import PointOfInterest


class CityInfoStore:
    """Holds cities keyed by id, each owning its points of interest."""

    def __init__(self):
        self._cities: Dict[int, City] = {}

    def add_city(self, city: City) -> City:
        if not city.is_valid():
            raise ValueError("Invalid city")
        if city.id in self._cities:
            raise ValueError(f"City with id {city.id} already exists")
        for point_of_interest in city.points_of_interest:
            if point_of_interest.city_id != city.id:
                raise ValueError(
                    f"Point of interest {point_of_interest.id} belongs to city "
                    f"{point_of_interest.city_id}, not {city.id}"
                )
        self._cities[city.id] = city
        return city

    def get_city(self, city_id: int) -> Optional[City]:
        return self._cities.get(city_id)

    def cities(self) -> List[City]:
        return list(self._cities.values())

    def points_of_interest(self) -> Iterator[PointOfInterest]:
        for city in self._cities.values():
            yield from city.points_of_interest

    def find_point_of_interest(self, point_of_interest_id: int) -> Optional[PointOfInterest]:
        for point_of_interest in self.points_of_interest():
            if point_of_interest.id == point_of_interest_id:
                return point_of_interest
        return None
