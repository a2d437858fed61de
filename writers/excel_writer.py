"""
EXCEL WRITER
------------
Writes export rows to an .xlsx file with a bold header row and
column widths sized to their content.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from aggregation.export import EXPORT_HEADERS
from domain.records import ExportRow


def write_rows_to_xlsx(output_path: Path, rows: Sequence[ExportRow], sheet_name: str = "Siparisler") -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)

    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name

    ws.append(list(EXPORT_HEADERS))
    for cell in ws[1]:
        cell.font = Font(bold=True)

    for row in rows:
        ws.append(list(row.as_tuple()))

    for c, header in enumerate(EXPORT_HEADERS, start=1):
        longest = max([len(header)] + [len(str(r.as_tuple()[c - 1])) for r in rows])
        ws.column_dimensions[get_column_letter(c)].width = min(60, longest + 2)

    ws.freeze_panes = "A2"
    wb.save(output_path)
    return output_path
