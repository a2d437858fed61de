from .settings import (
    CSV_ENCODING,
    DEFAULT_INPUT_PATH,
    DEFAULT_SORT_COLUMN,
    DEFAULT_SORT_DIRECTION,
    EXPORT_BASENAME,
    LOG_LEVEL,
    MAX_FILE_SIZE_MB,
    MAX_ROWS,
    OUTPUT_ROOT,
    PROJECT_ROOT,
)

__all__ = [
    "CSV_ENCODING",
    "DEFAULT_INPUT_PATH",
    "DEFAULT_SORT_COLUMN",
    "DEFAULT_SORT_DIRECTION",
    "EXPORT_BASENAME",
    "LOG_LEVEL",
    "MAX_FILE_SIZE_MB",
    "MAX_ROWS",
    "OUTPUT_ROOT",
    "PROJECT_ROOT",
]
