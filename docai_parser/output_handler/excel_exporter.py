"""
Excel Exporter Module.

Writes parsed documents to an .xlsx workbook with openpyxl.

Sheets:
    - Documents: one row per document with its header fields
    - Line Items: one row per line item, keyed by document number

Author: ML Engineering Team
"""

from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple, Union

import openpyxl
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from docai_parser.config import get_config
from docai_parser.models import Document
from docai_parser.utils.exceptions import ExcelExportError
from docai_parser.utils.helpers import ensure_directory, generate_timestamp, to_serializable
from docai_parser.utils.logger import get_logger

logger = get_logger(__name__)


class ExcelExporter:
    """
    Exports parsed documents to Excel format.

    Attributes:
        output_dir: Directory for output files
        documents_sheet: Title of the header-field sheet
        line_items_sheet: Title of the line item sheet

    Example:
        >>> exporter = ExcelExporter()
        >>> filepath = exporter.export([document], "expenses.xlsx")
    """

    DOCUMENT_COLUMNS = [
        ('Supplier Name', 'supplier_name'),
        ('Supplier Address', 'supplier_address'),
        ('Supplier Phone', 'supplier_phone'),
        ('Receipt Date', 'receipt_date'),
        ('Purchase Time', 'purchase_time'),
        ('Total Amount', 'total_amount'),
        ('Total Tax Amount', 'total_tax_amount'),
        ('Net Amount', 'net_amount'),
        ('Currency', 'currency'),
        ('Payment Type', 'payment_type'),
        ('Card Last Four', 'credit_card_last_four_digits'),
        ('Authorization ID', 'payment_authorization_id'),
    ]

    LINE_ITEM_COLUMNS = [
        ('Description', 'description'),
        ('Quantity', 'quantity'),
        ('Unit', 'unit'),
        ('Unit Price', 'unit_price'),
        ('Amount', 'amount'),
        ('Product Code', 'product_code'),
    ]

    HEADER_FILL = "4472C4"

    def __init__(self) -> None:
        self.output_dir = Path(get_config("paths.output_dir", "outputs"))
        self.documents_sheet = get_config("output.excel.documents_sheet", "Documents")
        self.line_items_sheet = get_config("output.excel.line_items_sheet", "Line Items")
        self.max_column_width = get_config("output.excel.max_column_width", 50)

        logger.debug(f"ExcelExporter initialized (output_dir: {self.output_dir})")

    def export(
        self,
        documents: Union[Document, Sequence[Document]],
        filename: Optional[str] = None,
        output_dir: Optional[str] = None
    ) -> str:
        """
        Export documents to an Excel file.

        Args:
            documents: Single document or a sequence of documents.
            filename: Output filename. If None, generated from
                ``output.excel.filename_pattern``.
            output_dir: Output directory. If None, uses ``paths.output_dir``.

        Returns:
            Path to the created Excel file.

        Raises:
            ExcelExportError: If there is nothing to export or saving fails.
        """
        if isinstance(documents, Document):
            documents = [documents]

        if not documents:
            raise ExcelExportError("(none)", "No documents to export")

        out_dir = ensure_directory(output_dir or self.output_dir)
        filepath = out_dir / (filename or self.get_default_filename())

        try:
            workbook = openpyxl.Workbook()

            documents_sheet = workbook.active
            documents_sheet.title = self.documents_sheet
            self._write_sheet(
                documents_sheet,
                [('Document', None)] + self.DOCUMENT_COLUMNS,
                [
                    [index] + [getattr(doc, attr) for _, attr in self.DOCUMENT_COLUMNS]
                    for index, doc in enumerate(documents, 1)
                ]
            )

            line_items_sheet = workbook.create_sheet(title=self.line_items_sheet)
            self._write_sheet(
                line_items_sheet,
                [('Document', None), ('Line', None)] + self.LINE_ITEM_COLUMNS,
                [
                    [doc_index, line_index] + [getattr(item, attr) for _, attr in self.LINE_ITEM_COLUMNS]
                    for doc_index, doc in enumerate(documents, 1)
                    for line_index, item in enumerate(doc.line_items, 1)
                ]
            )

            workbook.save(filepath)
        except Exception as e:
            logger.error(f"Excel export failed: {e}")
            raise ExcelExportError(str(filepath), str(e)) from e

        logger.info(f"Excel file saved: {filepath} ({len(documents)} documents)")
        return str(filepath)

    def _write_sheet(
        self,
        sheet: Worksheet,
        columns: List[Tuple[str, Any]],
        rows: List[List[Any]]
    ) -> None:
        """
        Write a styled header row, the data rows and size the columns.

        Args:
            sheet: Target worksheet.
            columns: (header, attribute) pairs.
            rows: Cell values, one list per row.
        """
        header_font = Font(bold=True, color="FFFFFF")
        header_fill = PatternFill(start_color=self.HEADER_FILL, end_color=self.HEADER_FILL, fill_type="solid")
        thin_border = Border(
            left=Side(style='thin'),
            right=Side(style='thin'),
            top=Side(style='thin'),
            bottom=Side(style='thin')
        )

        for col, (header_name, _) in enumerate(columns, 1):
            cell = sheet.cell(row=1, column=col, value=header_name)
            cell.font = header_font
            cell.fill = header_fill
            cell.alignment = Alignment(horizontal="center", vertical="center")
            cell.border = thin_border

        for row_num, values in enumerate(rows, 2):
            for col, value in enumerate(values, 1):
                cell = sheet.cell(row=row_num, column=col, value=self._cell_value(value))
                cell.border = thin_border

        for col, (header_name, _) in enumerate(columns, 1):
            max_length = len(header_name)
            for row_num in range(2, len(rows) + 2):
                cell_value = sheet.cell(row=row_num, column=col).value
                if cell_value is not None:
                    max_length = max(max_length, len(str(cell_value)))
            sheet.column_dimensions[get_column_letter(col)].width = min(max_length + 2, self.max_column_width)

        sheet.freeze_panes = 'A2'

    @staticmethod
    def _cell_value(value: Any) -> Any:
        # Amounts stay exact as text; dates become ISO strings
        if value is None:
            return ''
        return to_serializable(value)

    def get_default_filename(self) -> str:
        """Generate a default filename with timestamp."""
        pattern = get_config(
            "output.excel.filename_pattern",
            "expense_documents_{timestamp}.xlsx"
        )
        return pattern.format(timestamp=generate_timestamp())
