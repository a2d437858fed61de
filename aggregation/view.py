"""
View computation: filtering, sorting and the sort toggle cycle.

compute_view() runs the whole pipeline for one set of parameters:

    date filter -> aggregate -> annotate duplicates -> text filter -> sort

The date filter must run before aggregation so that quantities from
different days are never merged. The text filter only removes whole
groups by name, so running it after annotation keeps duplicate counts
relative to the full day.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from config.logging import get_logger
from config.settings import DEFAULT_SORT_COLUMN, DEFAULT_SORT_DIRECTION
from domain.records import (
    SORT_ASC,
    SORT_DESC,
    SORT_NAME,
    SORT_NONE,
    NormalizedRecord,
    SortState,
    ViewParams,
    ViewResult,
)
from fields.collation import casefold_simple, tr_sort_key
from fields.quantity import parse_magnitude

from .aggregator import aggregate
from .duplicates import annotate_duplicates

logger = get_logger(__name__)

_NEXT_DIRECTION = {SORT_ASC: SORT_DESC, SORT_DESC: SORT_NONE, SORT_NONE: SORT_ASC}


def filter_by_date(records: Sequence, date: Optional[str]) -> List:
    """Keep records whose date equals `date` exactly; no-op when `date` is empty."""
    if not date:
        return list(records)
    return [record for record in records if record.date == date]


def filter_by_text(records: Sequence, search_text: Optional[str]) -> List:
    """Keep records whose lowercased name contains the lowercased search text."""
    if not search_text:
        return list(records)
    needle = casefold_simple(search_text)
    return [record for record in records if needle in casefold_simple(record.name)]


def filter_records(records: Sequence, params: ViewParams) -> List:
    return filter_by_text(filter_by_date(records, params.date), params.search_text)


def sort_records(records: Sequence, column: str, direction: str) -> List:
    """
    Order records by name (Turkish collation) or by quantity magnitude.

    Sorting is stable in both directions; "none" returns the input order.
    """
    state = SortState(column, direction)
    if not state.active:
        return list(records)

    reverse = state.direction == SORT_DESC
    if state.column == SORT_NAME:
        return sorted(records, key=lambda record: tr_sort_key(record.name), reverse=reverse)
    return sorted(records, key=lambda record: parse_magnitude(record.quantity_text), reverse=reverse)


def next_sort_state(current: SortState, clicked_column: str) -> SortState:
    """
    Advance the sort toggle after a click on `clicked_column`.

    Same column: asc -> desc -> none -> asc. Another column: start at asc.
    """
    if clicked_column != current.column:
        return SortState(clicked_column, SORT_ASC)
    return SortState(clicked_column, _NEXT_DIRECTION[current.direction])


def compute_view(records: Sequence[NormalizedRecord], params: ViewParams) -> ViewResult:
    dated = filter_by_date(records, params.date)
    grouped = annotate_duplicates(aggregate(dated))
    matched = filter_by_text(grouped, params.search_text)
    ordered = sort_records(matched, params.sort.column, params.sort.direction)

    result = ViewResult(
        records=tuple(ordered),
        total_count=len(records),
        filtered_count=len(ordered),
        total_magnitude=sum(parse_magnitude(record.quantity_text) for record in ordered),
    )
    logger.debug(
        "view_computed",
        total=result.total_count,
        dated=len(dated),
        groups=len(grouped),
        visible=result.filtered_count,
        sort_column=params.sort.column,
        sort_direction=params.sort.direction,
    )
    return result


def default_sort_state() -> SortState:
    return SortState(DEFAULT_SORT_COLUMN, DEFAULT_SORT_DIRECTION)

