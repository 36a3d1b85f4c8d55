"""Data Transfer Objects for point of interest mutations."""
from dataclasses import dataclass
from typing import Optional

from cityinfo.domain.entities.point_of_interest import PointOfInterest


@dataclass
class PointOfInterestForUpdateDTO:
    """Updatable fields of a point of interest.

    Used for creation and full replacement, and as the mutable projection a
    patch is applied to. It never carries ``id`` or ``city_id``.
    """
    name: Optional[str]
    description: Optional[str] = None

    @classmethod
    def from_entity(cls, point_of_interest: PointOfInterest) -> "PointOfInterestForUpdateDTO":
        return cls(name=point_of_interest.name, description=point_of_interest.description)
