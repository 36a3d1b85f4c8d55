"""Patch operation value objects.

A patch document arrives as a list of JSON-Patch style operations
(``{"op": "replace", "path": "/name", "value": "..."}``). Before anything is
applied, each operation is resolved into one of a closed set of typed
instructions over the updatable fields, so nothing outside ``name`` and
``description`` can ever be addressed.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union


class PatchOp(Enum):
    """Supported patch verbs."""
    ADD = "add"
    REPLACE = "replace"
    REMOVE = "remove"
    TEST = "test"


class PatchField(Enum):
    """Fields a patch may address."""
    NAME = "name"
    DESCRIPTION = "description"

    @property
    def path(self) -> str:
        return f"/{self.value}"


@dataclass(frozen=True)
class PatchOperation:
    """Raw operation as received from the caller."""
    op: str
    path: str
    value: Any = None


@dataclass(frozen=True)
class ReplaceName:
    value: Optional[str]


@dataclass(frozen=True)
class ReplaceDescription:
    value: Optional[str]


@dataclass(frozen=True)
class AssertValue:
    """Asserts a field holds ``expected`` before later operations run."""
    field: PatchField
    expected: Optional[str]


FieldInstruction = Union[ReplaceName, ReplaceDescription, AssertValue]
