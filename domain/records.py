"""
Order record schema definitions.

Records move through the pipeline in one direction:

    raw row (dict of str) -> NormalizedRecord -> AggregatedRecord -> ExportRow

Every record type is a frozen dataclass. Stages never mutate their input;
they build new values with `dataclasses.replace`.

View parameters (`ViewParams`, `SortState`) are plain values too, so the
whole view can be recomputed from (records, params) at any time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

RawRow = Mapping[str, Optional[str]]

SORT_NAME = "name"
SORT_QUANTITY = "quantity"
SORT_COLUMNS = (SORT_NAME, SORT_QUANTITY)

SORT_ASC = "asc"
SORT_DESC = "desc"
SORT_NONE = "none"
SORT_DIRECTIONS = (SORT_ASC, SORT_DESC, SORT_NONE)


@dataclass(frozen=True)
class Quantity:
    magnitude: int
    unit: str

    def display(self) -> str:
        return f"{self.magnitude} {self.unit}"


@dataclass(frozen=True)
class NormalizedRecord:
    id: int
    name: str
    quantity_text: str
    date: str


@dataclass(frozen=True)
class AggregatedRecord:
    id: int
    name: str
    quantity_text: str
    date: str
    group_key: str
    duplicate_count: int = 1

    @property
    def is_duplicate(self) -> bool:
        return self.duplicate_count > 1


@dataclass(frozen=True)
class SortState:
    """Current sort column and direction, as toggled by the UI."""

    column: str
    direction: str

    def __post_init__(self) -> None:
        if self.column not in SORT_COLUMNS:
            raise ValueError(f"Unknown sort column: {self.column!r}")
        if self.direction not in SORT_DIRECTIONS:
            raise ValueError(f"Unknown sort direction: {self.direction!r}")

    @property
    def active(self) -> bool:
        return self.direction != SORT_NONE


@dataclass(frozen=True)
class ViewParams:
    """
    Everything that shapes the visible list.

    `date` and `search_text` are optional filters; an empty value disables
    the filter. `sort` defaults to "no ordering" (input order preserved).
    """

    date: Optional[str] = None
    search_text: str = ""
    sort: SortState = field(default_factory=lambda: SortState(SORT_QUANTITY, SORT_NONE))


@dataclass(frozen=True)
class ViewResult:
    records: Tuple[AggregatedRecord, ...]
    total_count: int
    filtered_count: int
    total_magnitude: int


@dataclass(frozen=True)
class ExportRow:
    date: str
    name: str
    unit: str
    magnitude: int

    def as_tuple(self) -> Tuple[str, str, str, int]:
        return (self.date, self.name, self.unit, self.magnitude)
