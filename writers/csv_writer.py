"""
CSV serialization of export rows.

Output is UTF-8 with a BOM so spreadsheet applications pick the right
encoding for Turkish characters.
"""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from aggregation.export import EXPORT_HEADERS
from config.settings import CSV_ENCODING, EXPORT_BASENAME
from domain.records import ExportRow


@dataclass
class CsvExportResult:
    """Result of CSV export operation."""
    csv_bytes: bytes
    row_count: int
    suggested_filename: str


def suggested_filename(suffix: str, on: Optional[date] = None) -> str:
    stamp = (on or date.today()).isoformat()
    return f"{EXPORT_BASENAME}_{stamp}{suffix}"


def write_rows_to_csv(rows: Sequence[ExportRow], on: Optional[date] = None) -> CsvExportResult:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(EXPORT_HEADERS)
    for row in rows:
        writer.writerow(row.as_tuple())

    return CsvExportResult(
        csv_bytes=buffer.getvalue().encode(CSV_ENCODING),
        row_count=len(rows),
        suggested_filename=suggested_filename(".csv", on),
    )
