"""
EXCEL READER
------------
Reads order workbooks into raw dict format with NO transformation.
Returns list of dicts keyed by the sheet's own header names; every
value is returned as a string ("" for empty cells).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from openpyxl import load_workbook

from config.logging import get_logger
from config.settings import MAX_FILE_SIZE_MB, MAX_ROWS

from .errors import LoadError

logger = get_logger(__name__)


def _cell_text(value) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def read_excel(xlsx_path: Path, sheet_name: str | None = None) -> List[Dict[str, str]]:
    """
    Read Excel file where row 1 = headers, rows 2+ = data.

    Args:
        xlsx_path: Path to Excel file
        sheet_name: Optional sheet name (uses first sheet if None)

    Returns:
        List of row dicts with original headers as keys

    Raises:
        LoadError: If the file doesn't exist, is too large or is not a valid workbook
    """
    xlsx_path = xlsx_path.expanduser().resolve()

    if not xlsx_path.exists():
        logger.warning("excel_missing", path=str(xlsx_path))
        raise LoadError("Excel dosyası bulunamadı.")

    if xlsx_path.stat().st_size > MAX_FILE_SIZE_MB * 1024 * 1024:
        raise LoadError(f"Excel dosyası çok büyük: en fazla {MAX_FILE_SIZE_MB} MB")

    try:
        wb = load_workbook(xlsx_path, data_only=True, read_only=True)
    except Exception as e:
        logger.error("excel_open_failed", path=str(xlsx_path), error=str(e))
        raise LoadError(f"Excel dosyası okunurken hata oluştu: {e}") from e

    try:
        if sheet_name and sheet_name not in wb.sheetnames:
            raise LoadError(f"Excel sayfası bulunamadı: {sheet_name}")
        ws = wb[sheet_name] if sheet_name else wb.worksheets[0]

        values = ws.iter_rows(values_only=True)
        header_row = next(values, None)
        if header_row is None:
            return []

        # Extract headers from row 1
        headers = [
            str(h).strip() if h is not None else f"col_{c}"
            for c, h in enumerate(header_row, start=1)
        ]

        # Extract data rows (skip empty rows)
        rows: List[Dict[str, str]] = []
        for raw in values:
            if all(v in (None, "") for v in raw):
                continue
            if len(rows) >= MAX_ROWS:
                logger.warning("excel_too_many_rows", path=str(xlsx_path), max_rows=MAX_ROWS)
                raise LoadError(f"Excel dosyası çok büyük: en fazla {MAX_ROWS} satır")
            rows.append({header: _cell_text(v) for header, v in zip(headers, raw)})
    finally:
        wb.close()

    logger.info("excel_loaded", path=str(xlsx_path), rows=len(rows))
    return rows
