"""Tests for JSON and Excel output."""

import json

import pytest

from ink_invoice.output_handler import ExcelExporter, OutputHandler
from ink_invoice.utils.exceptions import ExcelExportError, OutputError
from ink_invoice.vendors import Diagnostic, DiagnosticReason, ParsedItem, ParseResult

openpyxl = pytest.importorskip("openpyxl")


@pytest.fixture
def result():
    return ParseResult(
        vendor="solidInk",
        items=[
            ParsedItem("LIN1", "Black Label Lining Black", "1oz", 1650),
            ParsedItem("WHT2", "Opaque White", "2oz", 12),
        ],
        diagnostics=[
            Diagnostic("solidInk", 1, "Thank you", DiagnosticReason.UNMATCHED),
        ],
    )


def test_save_json(tmp_path, result):
    path = OutputHandler().save(result, tmp_path / "items.json")

    data = json.loads((tmp_path / "items.json").read_text(encoding="utf-8"))
    assert path.endswith("items.json")
    assert data["vendor"] == "solidInk"
    assert data["items"][0] == {
        'itemCode': 'LIN1', 'color': 'Black Label Lining Black', 'size': '1oz', 'quantity': 1650
    }
    assert data["diagnostics"][0]["reason"] == "unmatched"
    assert [ParsedItem.from_dict(item) for item in data["items"]] == result.items


def test_save_excel(tmp_path, result):
    OutputHandler().save(result, tmp_path / "items.xlsx")

    workbook = openpyxl.load_workbook(tmp_path / "items.xlsx")
    items = workbook["Items"]
    rows = list(items.iter_rows(values_only=True))
    assert rows[0] == ("Item Code", "Color", "Size", "Quantity")
    assert rows[1:] == [
        ("LIN1", "Black Label Lining Black", "1oz", 1650),
        ("WHT2", "Opaque White", "2oz", 12),
    ]
    assert items.freeze_panes == "A2"

    diagnostics = list(workbook["Diagnostics"].iter_rows(values_only=True))
    assert diagnostics[1] == (1, "unmatched", "Thank you", None)


def test_excel_writes_to_nested_path(tmp_path, result):
    target = tmp_path / "reports" / "april" / "items.xlsx"

    path = ExcelExporter().export(result, target)

    assert path == str(target)
    assert target.exists()


def test_excel_default_filename_uses_output_dir(tmp_path, result):
    path = ExcelExporter().export(result, output_dir=tmp_path)

    assert path.startswith(str(tmp_path))
    assert "parsed_items_solidInk_" in path


def test_excel_rejects_empty_result(tmp_path):
    with pytest.raises(ExcelExportError):
        ExcelExporter().export(ParseResult(vendor="eternal"), tmp_path / "empty.xlsx")


def test_unknown_suffix_is_rejected(tmp_path, result):
    with pytest.raises(OutputError):
        OutputHandler().save(result, tmp_path / "items.csv")
