from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from screen_compare.utils.errors import ErrorKind

# A numeric field holds a float once parsed, otherwise whatever the user typed.
RawValue = Union[float, int, str, None]

NUMERIC_FIELDS = ("diagonal", "aspect_x", "aspect_y")
EDITABLE_FIELDS = NUMERIC_FIELDS + ("color",)

@dataclass
class ScreenSpec:
    id: int
    diagonal: RawValue
    aspect_x: RawValue
    aspect_y: RawValue
    color: str

@dataclass(frozen=True)
class Dimensions:
    width: float
    height: float
    area: float

@dataclass(frozen=True)
class DerivedScreen:
    id: int
    diagonal: float
    aspect_x: float
    aspect_y: float
    color: str
    width: float
    height: float
    area: float

@dataclass(frozen=True)
class CollectionState:
    entries: Tuple[ScreenSpec, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def ids(self) -> Tuple[int, ...]:
        return tuple(e.id for e in self.entries)

@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    message: str = ""

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls(True, "")

    @classmethod
    def invalid(cls, message: str) -> ValidationResult:
        return cls(False, message)

class PipelineStatus(Enum):
    PENDING = "pending"  # nothing published yet
    VALID = "valid"
    INVALID = "invalid"

@dataclass(frozen=True)
class PipelineState:
    status: PipelineStatus
    results: Tuple[DerivedScreen, ...] = ()
    error: str = ""
    revision: int = 0

    @property
    def is_valid(self) -> bool:
        return self.status is PipelineStatus.VALID

@dataclass
class StoreResult:
    success: bool
    entry: Optional[ScreenSpec] = None
    error_kind: Optional[ErrorKind] = None
    error: Optional[str] = None
