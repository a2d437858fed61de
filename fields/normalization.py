"""
Raw row normalization.

Upstream sheets are inconsistent about header casing ("ürün" vs "Ürün"),
so every logical field has an ordered alias list. The first alias that
holds a non-empty value wins.

normalize_records() keeps input order, numbers rows from 1 in input order
(dropped rows still consume their number) and drops any row whose name or
quantity is empty after trimming.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from config.logging import get_logger
from domain.records import NormalizedRecord, RawRow

logger = get_logger(__name__)

NAME_ALIASES: Sequence[str] = ("ürün", "Ürün")
QUANTITY_ALIASES: Sequence[str] = ("miktar", "Miktar")


def _to_text(value: object) -> str:
    if value is None:
        return ""
    return str(value)


def resolve_field(row: RawRow, aliases: Sequence[str]) -> str:
    """Return the trimmed value of the first alias present with non-empty content."""
    for alias in aliases:
        value = _to_text(row.get(alias))
        if value:
            return value.strip()
    return ""


def normalize_records(rows: Iterable[RawRow], date: Optional[str] = None) -> List[NormalizedRecord]:
    """Convert raw rows into NormalizedRecords stamped with the batch `date`."""
    batch_date = date or ""
    records: List[NormalizedRecord] = []
    seen = 0

    for index, row in enumerate(rows, start=1):
        seen = index
        name = resolve_field(row, NAME_ALIASES)
        quantity = resolve_field(row, QUANTITY_ALIASES)
        if not name or not quantity:
            continue
        records.append(NormalizedRecord(id=index, name=name, quantity_text=quantity, date=batch_date))

    logger.debug("rows_normalized", rows_in=seen, records_out=len(records), date=batch_date)
    return records
