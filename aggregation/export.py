"""
Export rows for the current view.

Each visible record becomes exactly four fields, in this order:
date (display-formatted), product name, unit, magnitude. Serialization to
CSV/XLSX happens in `writers`; this module does no file I/O.
"""

from __future__ import annotations

from datetime import date as date_type
from typing import Callable, List, Optional, Sequence

from domain.records import AggregatedRecord, ExportRow
from fields.quantity import parse_magnitude, parse_unit

EXPORT_HEADERS = ("Tarih", "Ürün", "Birim", "Miktar")

DateFormatter = Callable[[str], str]


def format_display_date(value: Optional[str]) -> str:
    """Format an ISO date ("2026-10-17") the Turkish way ("17.10.2026")."""
    if not value:
        return ""
    try:
        parsed = date_type.fromisoformat(value.strip())
    except ValueError:
        return value
    return parsed.strftime("%d.%m.%Y")


def build_export_rows(
    records: Sequence[AggregatedRecord],
    date_formatter: DateFormatter = format_display_date,
) -> List[ExportRow]:
    return [
        ExportRow(
            date=date_formatter(record.date),
            name=record.name,
            unit=parse_unit(record.quantity_text),
            magnitude=parse_magnitude(record.quantity_text),
        )
        for record in records
    ]
