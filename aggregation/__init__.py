from .aggregator import aggregate, group_key
from .duplicates import annotate_duplicates, duplicate_names
from .export import EXPORT_HEADERS, build_export_rows, format_display_date
from .view import (
    compute_view,
    default_sort_state,
    filter_by_date,
    filter_by_text,
    filter_records,
    next_sort_state,
    sort_records,
)

__all__ = [
    "EXPORT_HEADERS",
    "aggregate",
    "annotate_duplicates",
    "build_export_rows",
    "compute_view",
    "default_sort_state",
    "duplicate_names",
    "filter_by_date",
    "filter_by_text",
    "filter_records",
    "format_display_date",
    "group_key",
    "next_sort_state",
    "sort_records",
]
