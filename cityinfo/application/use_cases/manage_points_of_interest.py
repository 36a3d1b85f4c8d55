"""Use case: manage the points of interest of a city.
Follows Single Responsibility Principle - only handles child mutations."""
import logging
from typing import Optional, Sequence

from cityinfo.application.dto.point_of_interest_dto import PointOfInterestForUpdateDTO
from cityinfo.application.dto.result_dto import MutationResult
from cityinfo.application.ports.notifier import Notifier
from cityinfo.application.services.patch_merger import PatchMerger
from cityinfo.domain.entities.point_of_interest import PointOfInterest
from cityinfo.domain.repositories.city_info_repository import CityInfoRepository
from cityinfo.domain.value_objects.patch import PatchOperation
from cityinfo.domain.value_objects.validation import SemanticValidationError

logger = logging.getLogger(__name__)

DELETED_SUBJECT = "Point of interest deleted."


class PointOfInterestManager:
    """Create, replace, patch and delete points of interest of a city.

    Follows Dependency Inversion Principle - depends on repository and notifier
    abstractions. Only ``delete`` commits on its own; other mutations are
    persisted when the caller invokes ``save_changes``.
    """

    def __init__(
        self,
        repository: CityInfoRepository,
        notifier: Notifier,
        patch_merger: Optional[PatchMerger] = None,
    ):
        self._repo = repository
        self._notifier = notifier
        self._patch_merger = patch_merger or PatchMerger()

    async def create(self, city_id: int, fields: PointOfInterestForUpdateDTO) -> MutationResult:
        """Create a point of interest under a city.

        The result is NOT_FOUND when the city does not exist and INVALID when
        the fields break the name or description constraints.
        """
        if not await self._repo.city_exists(city_id):
            logger.info(f"City with id {city_id} wasn't found when creating a point of interest")
            return MutationResult.not_found()

        error = self._check_fields(fields)
        if error is not None:
            return MutationResult.invalid(error)

        # Ids are unique store-wide, not per city
        max_id = await self._repo.get_max_point_of_interest_id()
        new_id = (max_id or 0) + 1

        point_of_interest = PointOfInterest(
            id=new_id,
            city_id=city_id,
            name=fields.name,
            description=fields.description,
        )
        created = await self._repo.add_point_of_interest(city_id, point_of_interest)
        if created is None:
            return MutationResult.not_found()
        return MutationResult.success(created)

    async def replace(
        self, city_id: int, point_of_interest_id: int, fields: PointOfInterestForUpdateDTO
    ) -> MutationResult:
        """Replace name and description of a point of interest."""
        point_of_interest = await self._find(city_id, point_of_interest_id)
        if point_of_interest is None:
            return MutationResult.not_found()

        error = self._check_fields(fields)
        if error is not None:
            return MutationResult.invalid(error)

        point_of_interest.update_details(fields.name, fields.description)
        await self._repo.update_point_of_interest(point_of_interest)
        return MutationResult.success(point_of_interest)

    async def patch(
        self, city_id: int, point_of_interest_id: int, operations: Sequence[PatchOperation]
    ) -> MutationResult:
        """Apply a partial update. Nothing is staged unless the patch is valid."""
        point_of_interest = await self._find(city_id, point_of_interest_id)
        if point_of_interest is None:
            return MutationResult.not_found()

        error = self._patch_merger.merge(point_of_interest, operations)
        if error is not None:
            return MutationResult.invalid(error)

        await self._repo.update_point_of_interest(point_of_interest)
        return MutationResult.success(point_of_interest)

    async def delete(self, city_id: int, point_of_interest_id: int) -> MutationResult:
        """Delete a point of interest and notify about it once removal is persisted."""
        point_of_interest = await self._find(city_id, point_of_interest_id)
        if point_of_interest is None:
            return MutationResult.not_found()

        await self._repo.remove_point_of_interest(point_of_interest)
        await self._repo.commit()

        try:
            await self._notifier.notify(
                DELETED_SUBJECT,
                f"Point of interest {point_of_interest.name} with id "
                f"{point_of_interest.id} was deleted.",
            )
        except Exception as e:
            logger.error(f"Failed to send delete notification for point of interest {point_of_interest.id}: {e}")

        return MutationResult.success(point_of_interest)

    async def save_changes(self) -> bool:
        """Persist staged mutations."""
        return await self._repo.commit()

    async def _find(self, city_id: int, point_of_interest_id: int) -> Optional[PointOfInterest]:
        if not await self._repo.city_exists(city_id):
            logger.info(f"City with id {city_id} wasn't found when accessing points of interest")
            return None
        return await self._repo.get_point_of_interest(city_id, point_of_interest_id)

    def _check_fields(self, fields: PointOfInterestForUpdateDTO) -> Optional[SemanticValidationError]:
        violations = self._patch_merger.validate(fields)
        if violations:
            logger.info(f"Point of interest fields rejected: {[v.message for v in violations]}")
            return SemanticValidationError(tuple(violations))
        return None
