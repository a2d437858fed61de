"""
Loading collaborators for order sheets.

load_rows() picks a reader by file suffix and returns raw rows
(dict of header -> string). Any failure surfaces as LoadError.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from .csv_reader import read_csv_rows
from .errors import LoadError
from .excel import read_excel

EXCEL_SUFFIXES = {".xlsx", ".xlsm"}


def load_rows(path: Path) -> List[Dict[str, str]]:
    if path.suffix.lower() in EXCEL_SUFFIXES:
        return read_excel(path)
    return read_csv_rows(path)


__all__ = ["EXCEL_SUFFIXES", "LoadError", "load_rows", "read_csv_rows", "read_excel"]
