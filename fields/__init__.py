from .collation import casefold_simple, tr_sort_key
from .normalization import NAME_ALIASES, QUANTITY_ALIASES, normalize_records, resolve_field
from .quantity import (
    DEFAULT_UNIT,
    UNITS,
    format_quantity,
    parse_magnitude,
    parse_quantity,
    parse_unit,
    quantity_phrasing,
)

__all__ = [
    "DEFAULT_UNIT",
    "NAME_ALIASES",
    "QUANTITY_ALIASES",
    "UNITS",
    "casefold_simple",
    "format_quantity",
    "normalize_records",
    "parse_magnitude",
    "parse_quantity",
    "parse_unit",
    "quantity_phrasing",
    "resolve_field",
    "tr_sort_key",
]
