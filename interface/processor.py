"""
Batch loading for the UI and the CLI.

Reads an order sheet (path or uploaded bytes), normalizes it and stamps
every record with the batch date. Load failures come back as a message
instead of an exception so callers can show them directly.
"""

from __future__ import annotations

import tempfile
from datetime import date
from pathlib import Path
from typing import List, Optional, Tuple, Union

from config.logging import get_logger
from domain.records import NormalizedRecord
from fields.normalization import normalize_records
from input_readers import EXCEL_SUFFIXES, LoadError, load_rows, read_csv_rows, read_excel

logger = get_logger(__name__)


def _read_upload(data: bytes, filename: str):
    suffix = Path(filename).suffix.lower()
    if suffix in EXCEL_SUFFIXES:
        with tempfile.TemporaryDirectory() as tmp:
            tmp_path = Path(tmp) / f"upload{suffix}"
            tmp_path.write_bytes(data)
            return read_excel(tmp_path)
    return read_csv_rows(data)


def load_batch(
    source: Union[Path, bytes],
    batch_date: Optional[date] = None,
    filename: str = "upload.csv",
) -> Tuple[bool, List[NormalizedRecord], Optional[str]]:
    """
    Load one batch of orders.

    Returns:
        (success, records, error_message)
    """
    stamp = (batch_date or date.today()).isoformat()
    try:
        rows = load_rows(source) if isinstance(source, Path) else _read_upload(source, filename)
    except LoadError as e:
        logger.warning("batch_load_failed", error=str(e))
        return False, [], str(e)

    records = normalize_records(rows, date=stamp)
    logger.info("batch_loaded", rows=len(rows), records=len(records), date=stamp)
    return True, records, None
