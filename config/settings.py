"""
Central configuration for input paths, limits and view defaults.

This module defines:
- Repository-relative input/output locations used by the CLI and the UI.
- Input limits to keep oversized order sheets out of memory.
- The initial view state (sort column/direction) shown after a load.
- Export naming and encoding.

Values are constants. A handful can be overridden through the environment
(or a `.env` file next to the project), read once at import time.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(key)
    if value is None:
        return default
    value = value.strip()
    return value or default


def _get_int(key: str, default: int) -> int:
    value = _get_env(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"Environment variable {key} must be an integer") from exc


PROJECT_ROOT = Path(__file__).resolve().parents[1]

DEFAULT_INPUT_PATH = Path(_get_env("SIPARIS_INPUT_PATH", str(PROJECT_ROOT / "urunler.csv")))
OUTPUT_ROOT = PROJECT_ROOT / "exports"

MAX_FILE_SIZE_MB = 20
MAX_ROWS = max(1, _get_int("SIPARIS_MAX_ROWS", 50_000))

CSV_ENCODING = "utf-8-sig"
EXPORT_BASENAME = "siparisler"

DEFAULT_SORT_COLUMN = "quantity"
DEFAULT_SORT_DIRECTION = "desc"

LOG_LEVEL = (_get_env("SIPARIS_LOG_LEVEL", "INFO") or "INFO").upper()
