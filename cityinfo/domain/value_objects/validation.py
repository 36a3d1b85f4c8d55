"""Validation outcome value objects for the patch pipeline."""
from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class PatchError:
    """One offending patch operation."""
    index: int
    op: str
    path: str
    message: str

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "op": self.op,
            "path": self.path,
            "message": self.message,
        }


@dataclass(frozen=True)
class ConstraintViolation:
    """One violated field constraint."""
    field: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True)
class StructuralValidationError:
    """Patch could not be applied to the projection."""
    errors: Tuple[PatchError, ...]

    kind = "structural"

    def messages(self) -> List[str]:
        return [f"{e.path}: {e.message}" for e in self.errors]

    def to_list(self) -> List[dict]:
        return [e.to_dict() for e in self.errors]


@dataclass(frozen=True)
class SemanticValidationError:
    """Patched projection violates field constraints."""
    violations: Tuple[ConstraintViolation, ...]

    kind = "semantic"

    def messages(self) -> List[str]:
        return [f"{v.field}: {v.message}" for v in self.violations]

    def to_list(self) -> List[dict]:
        return [v.to_dict() for v in self.violations]
