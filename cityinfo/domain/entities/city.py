"""City domain entity - pure business logic."""
from dataclasses import dataclass, field
from typing import List, Optional
from cityinfo.domain.entities.point_of_interest import PointOfInterest


@dataclass
class City:
    """City domain entity.

    ``points_of_interest`` is only populated when the city was loaded with
    its children; otherwise it is left empty.
    """
    id: int
    name: str
    description: Optional[str] = None
    points_of_interest: List[PointOfInterest] = field(default_factory=list)

    def is_valid(self) -> bool:
        """Validate city business rules."""
        return bool(self.name and self.name.strip())

    def matches_search(self, search_query: str) -> bool:
        """True when name or description contains the query."""
        if search_query in self.name:
            return True
        return self.description is not None and search_query in self.description
