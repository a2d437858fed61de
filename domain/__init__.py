from .records import (
    SORT_ASC,
    SORT_COLUMNS,
    SORT_DESC,
    SORT_DIRECTIONS,
    SORT_NAME,
    SORT_NONE,
    SORT_QUANTITY,
    AggregatedRecord,
    ExportRow,
    NormalizedRecord,
    Quantity,
    RawRow,
    SortState,
    ViewParams,
    ViewResult,
)

__all__ = [
    "SORT_ASC",
    "SORT_COLUMNS",
    "SORT_DESC",
    "SORT_DIRECTIONS",
    "SORT_NAME",
    "SORT_NONE",
    "SORT_QUANTITY",
    "AggregatedRecord",
    "ExportRow",
    "NormalizedRecord",
    "Quantity",
    "RawRow",
    "SortState",
    "ViewParams",
    "ViewResult",
]
