"""
Writers that turn a :class:`QueryResult` into a file on disk.

    csv    → every field quoted, NULL as an empty field
    excel  → one *Query Results* sheet, header in the first row
    yaml   → ``query_result: {total_rows, columns, rows, generated_at}``
"""
from __future__ import annotations
import csv
import datetime as dt
import pathlib
import typing as t

import yaml
from openpyxl import Workbook

from sqltools.constants import EXCEL_SHEET_NAME, FORMATS
from sqltools.executor import QueryResult


def extension(fmt: str) -> str:
    try:
        return FORMATS[fmt]
    except KeyError as exc:
        raise ValueError(f"Unsupported format: {fmt}") from exc


def export_csv(result: QueryResult, path: pathlib.Path) -> None:
    with path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.writer(fh, quoting=csv.QUOTE_ALL)
        for row in result.as_table():
            writer.writerow(["" if v is None else v for v in row])


def export_excel(result: QueryResult, path: pathlib.Path) -> None:
    wb = Workbook()
    ws = wb.active
    ws.title = EXCEL_SHEET_NAME
    for row in result.as_table():
        ws.append(row)
    wb.save(path)


def yaml_document(result: QueryResult, generated_at: dt.datetime | None = None) -> dict:
    """Build the mapping written by :func:`export_yaml`."""
    rows = [
        {col: row[i] if i < len(row) else None for i, col in enumerate(result.headers)}
        for row in result.rows
    ]
    stamp = generated_at or dt.datetime.now()
    return {
        "query_result": {
            "total_rows": len(rows),
            "columns": list(result.headers),
            "rows": rows,
            "generated_at": stamp.isoformat(),
        }
    }


def export_yaml(result: QueryResult, path: pathlib.Path) -> None:
    with path.open("w", encoding="utf-8") as fh:
        yaml.safe_dump(
            yaml_document(result),
            fh,
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )


_WRITERS: dict[str, t.Callable[[QueryResult, pathlib.Path], None]] = {
    "csv": export_csv,
    "excel": export_excel,
    "yaml": export_yaml,
}


def export(result: QueryResult, path: pathlib.Path, fmt: str) -> pathlib.Path:
    """Write *result* to *path* in *fmt* and return the path."""
    try:
        writer = _WRITERS[fmt]
    except KeyError as exc:
        raise ValueError(f"Unsupported format: {fmt}") from exc
    writer(result, path)
    return path
