"""City API routes - thin layer delegating to the repository.
Follows Single Responsibility Principle - only handles HTTP concerns."""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from cityinfo.api.v1.schemas.city_schemas import (
    CitySchema,
    CityWithoutPointsOfInterestSchema,
    PaginationMetadataSchema,
)
from cityinfo.config import settings
from cityinfo.core.dependencies import get_city_info_repository
from cityinfo.domain.repositories.city_info_repository import CityInfoRepository

router = APIRouter(tags=["cities"])


@router.get("/cities", response_model=List[CityWithoutPointsOfInterestSchema])
async def get_cities(
    response: Response,
    name: Optional[str] = None,
    search_query: Optional[str] = Query(None, alias="searchQuery"),
    page_number: int = Query(1, alias="pageNumber", ge=1),
    page_size: int = Query(settings.DEFAULT_CITIES_PAGE_SIZE, alias="pageSize", ge=1),
    repository: CityInfoRepository = Depends(get_city_info_repository),
):
    """
    List cities ordered by name.

    Pagination metadata is returned in the X-Pagination header.
    """
    page_size = min(page_size, settings.MAX_CITIES_PAGE_SIZE)

    cities, metadata = await repository.list_cities(name, search_query, page_number, page_size)

    response.headers["X-Pagination"] = (
        PaginationMetadataSchema.from_metadata(metadata).model_dump_json(by_alias=True)
    )
    return [CityWithoutPointsOfInterestSchema.from_entity(c) for c in cities]


@router.get("/cities/{city_id}", response_model=None)
async def get_city(
    city_id: int,
    include_points_of_interest: bool = Query(False, alias="includePointsOfInterest"),
    repository: CityInfoRepository = Depends(get_city_info_repository),
) -> Dict[str, Any]:
    """Get a city, optionally with its points of interest."""
    city = await repository.get_city(city_id, include_points_of_interest)
    if not city:
        raise HTTPException(status_code=404, detail=f"City {city_id} not found")

    if include_points_of_interest:
        return CitySchema.from_entity(city).model_dump(by_alias=True)
    return CityWithoutPointsOfInterestSchema.from_entity(city).model_dump(by_alias=True)
