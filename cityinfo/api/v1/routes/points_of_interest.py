"""Point of interest API routes - thin layer delegating to the manager.
Follows Single Responsibility Principle - only handles HTTP concerns."""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse

from cityinfo.api.v1.schemas.city_schemas import (
    PatchOperationSchema,
    PointOfInterestForUpdateSchema,
    PointOfInterestSchema,
)
from cityinfo.application.dto.point_of_interest_dto import PointOfInterestForUpdateDTO
from cityinfo.application.dto.result_dto import MutationStatus
from cityinfo.application.use_cases.manage_points_of_interest import PointOfInterestManager
from cityinfo.core.dependencies import get_city_info_repository, get_point_of_interest_manager
from cityinfo.domain.repositories.city_info_repository import CityInfoRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cities/{city_id}/pointsofinterest", tags=["points of interest"])


def _invalid_response(error) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"kind": error.kind, "errors": error.to_list()},
    )


@router.get("", response_model=List[PointOfInterestSchema])
async def get_points_of_interest(
    city_id: int,
    repository: CityInfoRepository = Depends(get_city_info_repository),
):
    """List the points of interest of a city."""
    if not await repository.city_exists(city_id):
        logger.info(f"City with id {city_id} wasn't found when accessing points of interest")
        raise HTTPException(status_code=404, detail=f"City {city_id} not found")

    points_of_interest = await repository.list_points_of_interest(city_id)
    return [PointOfInterestSchema.from_entity(p) for p in points_of_interest]


@router.get(
    "/{point_of_interest_id}",
    response_model=PointOfInterestSchema,
    name="get_point_of_interest",
)
async def get_point_of_interest(
    city_id: int,
    point_of_interest_id: int,
    repository: CityInfoRepository = Depends(get_city_info_repository),
):
    """Get one point of interest of a city."""
    if not await repository.city_exists(city_id):
        logger.info(f"City with id {city_id} wasn't found when accessing points of interest")
        raise HTTPException(status_code=404, detail=f"City {city_id} not found")

    point_of_interest = await repository.get_point_of_interest(city_id, point_of_interest_id)
    if not point_of_interest:
        raise HTTPException(status_code=404, detail=f"Point of interest {point_of_interest_id} not found")
    return PointOfInterestSchema.from_entity(point_of_interest)


@router.post("", response_model=PointOfInterestSchema, status_code=status.HTTP_201_CREATED)
async def create_point_of_interest(
    city_id: int,
    body: PointOfInterestForUpdateSchema,
    request: Request,
    response: Response,
    manager: PointOfInterestManager = Depends(get_point_of_interest_manager),
):
    """Create a point of interest under a city."""
    result = await manager.create(
        city_id,
        PointOfInterestForUpdateDTO(name=body.name, description=body.description),
    )
    if result.status is MutationStatus.NOT_FOUND:
        raise HTTPException(status_code=404, detail=f"City {city_id} not found")
    if result.status is MutationStatus.INVALID:
        return _invalid_response(result.error)

    created = result.point_of_interest

    await manager.save_changes()

    response.headers["Location"] = str(
        request.url_for("get_point_of_interest", city_id=city_id, point_of_interest_id=created.id)
    )
    return PointOfInterestSchema.from_entity(created)


@router.put("/{point_of_interest_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_point_of_interest(
    city_id: int,
    point_of_interest_id: int,
    body: PointOfInterestForUpdateSchema,
    manager: PointOfInterestManager = Depends(get_point_of_interest_manager),
):
    """Fully replace name and description of a point of interest."""
    result = await manager.replace(
        city_id,
        point_of_interest_id,
        PointOfInterestForUpdateDTO(name=body.name, description=body.description),
    )
    if result.status is MutationStatus.NOT_FOUND:
        raise HTTPException(status_code=404, detail=f"Point of interest {point_of_interest_id} not found")
    if result.status is MutationStatus.INVALID:
        return _invalid_response(result.error)

    await manager.save_changes()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{point_of_interest_id}", status_code=status.HTTP_204_NO_CONTENT)
async def partially_update_point_of_interest(
    city_id: int,
    point_of_interest_id: int,
    patch_document: List[PatchOperationSchema],
    manager: PointOfInterestManager = Depends(get_point_of_interest_manager),
):
    """Apply a JSON Patch document to a point of interest."""
    result = await manager.patch(
        city_id,
        point_of_interest_id,
        [operation.to_operation() for operation in patch_document],
    )
    if result.status is MutationStatus.NOT_FOUND:
        raise HTTPException(status_code=404, detail=f"Point of interest {point_of_interest_id} not found")
    if result.status is MutationStatus.INVALID:
        return _invalid_response(result.error)

    await manager.save_changes()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{point_of_interest_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_point_of_interest(
    city_id: int,
    point_of_interest_id: int,
    manager: PointOfInterestManager = Depends(get_point_of_interest_manager),
):
    """Delete a point of interest."""
    result = await manager.delete(city_id, point_of_interest_id)
    if result.status is MutationStatus.NOT_FOUND:
        raise HTTPException(status_code=404, detail=f"Point of interest {point_of_interest_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
