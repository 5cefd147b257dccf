from __future__ import annotations

import datetime as dt

import pytest
import yaml
from openpyxl import load_workbook

from sqltools.executor import QueryResult
from sqltools.exporters import export, extension, yaml_document


@pytest.fixture
def result():
    return QueryResult(["name", "dept"], [["Ann", "SALES"], ["Bob", None]])


def test_extensions():
    assert [extension(f) for f in ("csv", "excel", "yaml")] == ["csv", "xlsx", "yaml"]
    with pytest.raises(ValueError):
        extension("json")


def test_csv_quotes_every_field(tmp_path, result):
    path = export(result, tmp_path / "out.csv", "csv")
    assert path.read_text(encoding="utf-8").splitlines() == [
        '"name","dept"',
        '"Ann","SALES"',
        '"Bob",""',
    ]


def test_excel_sheet(tmp_path, result):
    path = export(result, tmp_path / "out.xlsx", "excel")
    ws = load_workbook(path).active
    assert ws.title == "Query Results"
    assert [list(r) for r in ws.iter_rows(values_only=True)] == [
        ["name", "dept"],
        ["Ann", "SALES"],
        ["Bob", None],
    ]


def test_yaml_document_shape(result):
    doc = yaml_document(result, generated_at=dt.datetime(2024, 5, 1, 9, 30))
    assert doc == {
        "query_result": {
            "total_rows": 2,
            "columns": ["name", "dept"],
            "rows": [{"name": "Ann", "dept": "SALES"}, {"name": "Bob", "dept": None}],
            "generated_at": "2024-05-01T09:30:00",
        }
    }


def test_yaml_file_keeps_column_order(tmp_path, result):
    path = export(result, tmp_path / "out.yaml", "yaml")
    text = path.read_text(encoding="utf-8")
    assert text.startswith("query_result:\n  total_rows: 2\n")
    loaded = yaml.safe_load(text)["query_result"]
    assert list(loaded["rows"][0]) == ["name", "dept"]


def test_unknown_format(tmp_path, result):
    with pytest.raises(ValueError, match="Unsupported format"):
        export(result, tmp_path / "x", "json")
