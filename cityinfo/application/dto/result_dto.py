"""Outcome of a point of interest mutation."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from cityinfo.domain.entities.point_of_interest import PointOfInterest
from cityinfo.domain.value_objects.validation import (
    SemanticValidationError,
    StructuralValidationError,
)


class MutationStatus(Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    INVALID = "invalid"


@dataclass
class MutationResult:
    """Result value returned instead of raising for expected outcomes."""
    status: MutationStatus
    point_of_interest: Optional[PointOfInterest] = None
    error: Optional[Union[StructuralValidationError, SemanticValidationError]] = None

    @property
    def succeeded(self) -> bool:
        return self.status is MutationStatus.SUCCESS

    @classmethod
    def success(cls, point_of_interest: Optional[PointOfInterest] = None) -> "MutationResult":
        return cls(MutationStatus.SUCCESS, point_of_interest=point_of_interest)

    @classmethod
    def not_found(cls) -> "MutationResult":
        return cls(MutationStatus.NOT_FOUND)

    @classmethod
    def invalid(cls, error: Union[StructuralValidationError, SemanticValidationError]) -> "MutationResult":
        return cls(MutationStatus.INVALID, error=error)
