from __future__ import annotations
import pathlib

DEFAULT_CONFIG_FILE = pathlib.Path("sqltools.config.yml")
DEFAULT_DATABASE_KEY = "default"
DEFAULT_OUTPUT_DIR = pathlib.Path("output")
DEFAULT_PORT = 3306

# format name -> file extension
FORMATS: dict[str, str] = {
    "csv": "csv",
    "excel": "xlsx",
    "yaml": "yaml",
}
DEFAULT_FORMAT = "csv"

EXCEL_SHEET_NAME = "Query Results"
TIMESTAMP_FMT = "%Y%m%d_%H%M%S"
