"""Pydantic schemas for city and point of interest API payloads."""
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from cityinfo.config import settings
from cityinfo.domain.entities.city import City
from cityinfo.domain.entities.point_of_interest import PointOfInterest
from cityinfo.domain.value_objects.pagination import PaginationMetadata
from cityinfo.domain.value_objects.patch import PatchOperation


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PointOfInterestSchema(CamelModel):
    """Point of interest schema."""
    id: int
    name: str
    description: Optional[str] = None

    @classmethod
    def from_entity(cls, point_of_interest: PointOfInterest) -> "PointOfInterestSchema":
        return cls(
            id=point_of_interest.id,
            name=point_of_interest.name,
            description=point_of_interest.description,
        )


class CityWithoutPointsOfInterestSchema(CamelModel):
    """City schema without children."""
    id: int
    name: str
    description: Optional[str] = None

    @classmethod
    def from_entity(cls, city: City) -> "CityWithoutPointsOfInterestSchema":
        return cls(id=city.id, name=city.name, description=city.description)


class CitySchema(CityWithoutPointsOfInterestSchema):
    """City schema including its points of interest."""
    number_of_points_of_interest: int = 0
    points_of_interest: List[PointOfInterestSchema] = []

    @classmethod
    def from_entity(cls, city: City) -> "CitySchema":
        return cls(
            id=city.id,
            name=city.name,
            description=city.description,
            number_of_points_of_interest=len(city.points_of_interest),
            points_of_interest=[PointOfInterestSchema.from_entity(p) for p in city.points_of_interest],
        )


class PointOfInterestForUpdateSchema(CamelModel):
    """Body for creating or fully replacing a point of interest."""
    name: str = Field(..., max_length=settings.POI_NAME_MAX_LENGTH)
    description: Optional[str] = Field(None, max_length=settings.POI_DESCRIPTION_MAX_LENGTH)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("You should provide a name value.")
        return value


class PatchOperationSchema(BaseModel):
    """One JSON Patch operation."""
    op: str
    path: str
    value: Any = None

    def to_operation(self) -> PatchOperation:
        return PatchOperation(op=self.op, path=self.path, value=self.value)


class PaginationMetadataSchema(CamelModel):
    """Pagination metadata sent in the X-Pagination header."""
    total_item_count: int
    total_page_count: int
    page_size: int
    current_page: int

    @classmethod
    def from_metadata(cls, metadata: PaginationMetadata) -> "PaginationMetadataSchema":
        return cls(**metadata.to_dict())
