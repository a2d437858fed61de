"""
CSV READER
----------
Reads order CSV files into raw dict format with NO transformation.
Every cell comes back as a string; blank lines are skipped.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Dict, List, Union

import pandas as pd

from config.logging import get_logger
from config.settings import CSV_ENCODING, MAX_FILE_SIZE_MB, MAX_ROWS

from .errors import LoadError

logger = get_logger(__name__)

CsvSource = Union[Path, bytes]


def _frame_to_rows(df: pd.DataFrame) -> List[Dict[str, str]]:
    df.columns = [str(c).strip() for c in df.columns]
    return df.to_dict(orient="records")


def _check_size(size_bytes: int, label: str) -> None:
    if size_bytes > MAX_FILE_SIZE_MB * 1024 * 1024:
        raise LoadError(f"CSV dosyası çok büyük ({label}): en fazla {MAX_FILE_SIZE_MB} MB")


def read_csv_rows(source: CsvSource) -> List[Dict[str, str]]:
    """
    Read a CSV file (path or raw bytes) where row 1 = headers, rows 2+ = data.

    Raises:
        LoadError: If the file doesn't exist, is too large, has more than MAX_ROWS rows
            or cannot be parsed
    """
    if isinstance(source, Path):
        path = source.expanduser().resolve()
        if not path.exists():
            logger.warning("csv_missing", path=str(path))
            raise LoadError("CSV dosyası bulunamadı.")
        _check_size(path.stat().st_size, path.name)
        label = str(path)
        handle: Union[Path, io.BytesIO] = path
    else:
        _check_size(len(source), "upload")
        label = "upload"
        handle = io.BytesIO(source)

    try:
        df = pd.read_csv(
            handle,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            encoding=CSV_ENCODING,
            nrows=MAX_ROWS + 1,
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        logger.error("csv_parse_failed", source=label, error=str(e))
        raise LoadError(f"CSV dosyası okunurken hata oluştu: {e}") from e

    if len(df) > MAX_ROWS:
        logger.warning("csv_too_many_rows", source=label, max_rows=MAX_ROWS)
        raise LoadError(f"CSV dosyası çok büyük: en fazla {MAX_ROWS} satır")

    rows = _frame_to_rows(df)
    logger.info("csv_loaded", source=label, rows=len(rows))
    return rows
