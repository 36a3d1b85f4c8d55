"""Repository interfaces."""
from cityinfo.domain.repositories.city_info_repository import CityInfoRepository

__all__ = [
    "CityInfoRepository",
]
