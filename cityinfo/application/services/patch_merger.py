"""Merge-patch pipeline for points of interest.

The live entity is only touched once every operation has been applied to a
detached projection and the result has passed validation.
"""
import logging
from typing import List, Optional, Sequence, Tuple, Union

from cityinfo.application.dto.point_of_interest_dto import PointOfInterestForUpdateDTO
from cityinfo.config import settings
from cityinfo.domain.entities.point_of_interest import PointOfInterest
from cityinfo.domain.value_objects.patch import (
    AssertValue,
    FieldInstruction,
    PatchField,
    PatchOp,
    PatchOperation,
    ReplaceDescription,
    ReplaceName,
)
from cityinfo.domain.value_objects.validation import (
    ConstraintViolation,
    PatchError,
    SemanticValidationError,
    StructuralValidationError,
)

logger = logging.getLogger(__name__)

PatchValidationError = Union[StructuralValidationError, SemanticValidationError]

IMMUTABLE_FIELDS = {"id", "cityid", "city_id"}


class PatchMerger:
    """Applies patch operations to a point of interest."""

    def __init__(
        self,
        name_max_length: int = settings.POI_NAME_MAX_LENGTH,
        description_max_length: int = settings.POI_DESCRIPTION_MAX_LENGTH,
    ):
        self.name_max_length = name_max_length
        self.description_max_length = description_max_length

    def merge(
        self, target: PointOfInterest, operations: Sequence[PatchOperation]
    ) -> Optional[PatchValidationError]:
        """Apply ``operations`` to ``target``.

        Returns None on success (``target`` updated in place), otherwise the
        structural or semantic error; ``target`` is then left unchanged.
        """
        projection = PointOfInterestForUpdateDTO.from_entity(target)

        errors = self.apply(projection, operations)
        if errors:
            logger.info(
                f"Patch for point of interest {target.id} rejected: "
                f"{len(errors)} invalid operation(s)"
            )
            return StructuralValidationError(errors=tuple(errors))

        violations = self.validate(projection)
        if violations:
            logger.info(
                f"Patch for point of interest {target.id} rejected: "
                f"{', '.join(v.field for v in violations)} invalid"
            )
            return SemanticValidationError(violations=tuple(violations))

        target.name = projection.name
        target.description = projection.description
        return None

    def apply(
        self, projection: PointOfInterestForUpdateDTO, operations: Sequence[PatchOperation]
    ) -> List[PatchError]:
        """Apply operations in order to the projection, collecting failures."""
        errors: List[PatchError] = []
        for index, operation in enumerate(operations):
            instruction, message = self.resolve(operation)
            if instruction is None:
                errors.append(PatchError(index, str(operation.op), str(operation.path), message))
                continue

            if isinstance(instruction, ReplaceName):
                projection.name = instruction.value
            elif isinstance(instruction, ReplaceDescription):
                projection.description = instruction.value
            else:
                current = getattr(projection, instruction.field.value)
                if current != instruction.expected:
                    errors.append(PatchError(
                        index,
                        operation.op,
                        operation.path,
                        f"The current value '{current}' does not match the test value "
                        f"'{instruction.expected}'",
                    ))
        return errors

    def resolve(self, operation: PatchOperation) -> Tuple[Optional[FieldInstruction], str]:
        """Map a raw operation onto a typed instruction.

        Returns (instruction, "") or (None, reason).
        """
        try:
            op = PatchOp(str(operation.op).lower())
        except ValueError:
            return None, f"Unsupported operation '{operation.op}'"

        if not isinstance(operation.path, str) or not operation.path.startswith("/"):
            return None, f"Invalid path '{operation.path}'"
        segment = operation.path[1:]
        if "/" in segment:
            return None, f"The target location '{operation.path}' was not found"
        if segment.lower() in IMMUTABLE_FIELDS:
            return None, f"The field '{segment}' cannot be changed"
        try:
            field = PatchField(segment.lower())
        except ValueError:
            return None, f"The target location '{operation.path}' was not found"

        if op is PatchOp.REMOVE:
            value = None
        else:
            value = operation.value
            if value is not None and not isinstance(value, str):
                return None, (
                    f"The value '{value}' is invalid for target location "
                    f"'{operation.path}': expected a string"
                )

        if op is PatchOp.TEST:
            return AssertValue(field=field, expected=value), ""
        if field is PatchField.NAME:
            return ReplaceName(value), ""
        return ReplaceDescription(value), ""

    def validate(self, projection: PointOfInterestForUpdateDTO) -> List[ConstraintViolation]:
        """Check field constraints on a merged projection."""
        violations: List[ConstraintViolation] = []
        if projection.name is None or not projection.name.strip():
            violations.append(ConstraintViolation("name", "You should provide a name value."))
        elif len(projection.name) > self.name_max_length:
            violations.append(ConstraintViolation(
                "name",
                f"The field name must be a string with a maximum length of {self.name_max_length}.",
            ))
        if projection.description is not None and len(projection.description) > self.description_max_length:
            violations.append(ConstraintViolation(
                "description",
                f"The field description must be a string with a maximum length of "
                f"{self.description_max_length}.",
            ))
        return violations
