"""Point of interest domain entity - pure business logic."""
from dataclasses import dataclass
from typing import Optional


@dataclass
class PointOfInterest:
    """Point of interest owned by exactly one city.

    ``id`` is unique across the whole store, not only within the city.
    ``city_id`` never changes after creation.
    """
    id: int
    city_id: int
    name: str
    description: Optional[str] = None

    def is_valid(self) -> bool:
        """Validate point of interest business rules."""
        return bool(self.name and self.name.strip() and self.city_id > 0)

    def update_details(self, name: str, description: Optional[str]):
        """Replace the mutable fields."""
        if not name or not name.strip():
            raise ValueError("Point of interest name cannot be empty")
        self.name = name
        self.description = description
