"""Tests for JSON and Excel export."""

import json

import openpyxl
import pytest

from docai_parser.models import Document
from docai_parser.output_handler import ExcelExporter, JsonExporter, OutputHandler
from docai_parser.utils.exceptions import ExcelExportError


class TestJsonExporter:

    def test_single_document_is_an_object(self, document, tmp_path):
        path = JsonExporter().export(document, "receipt.json", str(tmp_path))

        data = json.loads((tmp_path / "receipt.json").read_text(encoding="utf-8"))
        assert path == str(tmp_path / "receipt.json")
        assert data["supplier_name"] == "Trader Joe's"
        assert data["total_amount"] == "162.44"
        assert len(data["line_items"]) == 5

    def test_several_documents_are_an_array(self, document, tmp_path):
        JsonExporter().export([document, document], "all.json", str(tmp_path))

        data = json.loads((tmp_path / "all.json").read_text(encoding="utf-8"))
        assert isinstance(data, list)
        assert len(data) == 2


class TestExcelExporter:

    def test_workbook_layout(self, document, tmp_path):
        path = ExcelExporter().export(document, "receipt.xlsx", str(tmp_path))
        workbook = openpyxl.load_workbook(path)

        assert workbook.sheetnames == ["Documents", "Line Items"]

        documents_sheet = workbook["Documents"]
        headers = [cell.value for cell in documents_sheet[1]]
        assert headers[:2] == ["Document", "Supplier Name"]
        row = {h: c.value for h, c in zip(headers, documents_sheet[2])}
        assert row["Supplier Name"] == "Trader Joe's"
        assert row["Total Amount"] == "162.44"
        assert row["Receipt Date"] == "2024-11-27"
        assert row["Currency"] == "USD"

        items_sheet = workbook["Line Items"]
        assert items_sheet.max_row == 1 + 5
        assert items_sheet.cell(row=2, column=3).value == "HOL POTATO WEDGES HERBS"
        assert items_sheet.freeze_panes == "A2"

    def test_line_items_keyed_by_document(self, document, tmp_path):
        path = ExcelExporter().export([document, document], "two.xlsx", str(tmp_path))
        items_sheet = openpyxl.load_workbook(path)["Line Items"]

        document_numbers = [items_sheet.cell(row=r, column=1).value for r in range(2, items_sheet.max_row + 1)]
        assert document_numbers == [1] * 5 + [2] * 5

    def test_empty_input_raises(self, tmp_path):
        with pytest.raises(ExcelExportError):
            ExcelExporter().export([], "none.xlsx", str(tmp_path))

    def test_default_filename(self):
        filename = ExcelExporter().get_default_filename()
        assert filename.startswith("expense_documents_")
        assert filename.endswith(".xlsx")


class TestOutputHandler:

    def test_dispatch_on_suffix(self, document, tmp_path):
        handler = OutputHandler()

        xlsx_path = handler.save(document, tmp_path / "out.xlsx")
        json_path = handler.save(document, tmp_path / "out.json")

        assert (tmp_path / "out.xlsx").exists()
        assert xlsx_path.endswith("out.xlsx")
        assert (tmp_path / "out.json").exists()
        assert json_path.endswith("out.json")

    def test_unsupported_suffix(self, document, tmp_path):
        with pytest.raises(ValueError, match="Unsupported output format"):
            OutputHandler().save(document, tmp_path / "out.csv")

    def test_empty_document_exports(self, tmp_path):
        path = OutputHandler().save(Document(), tmp_path / "empty.xlsx")
        sheet = openpyxl.load_workbook(path)["Line Items"]
        assert sheet.max_row == 1

    def test_to_excel_default_filename(self, document, tmp_path):
        path = OutputHandler().to_excel(document, output_dir=str(tmp_path))
        assert path.endswith(".xlsx")
        assert "expense_documents_" in path
