"""
Main Output Handler Module.

OutputHandler picks the exporter from the output file's extension, so
callers (and main.py) only pass a path.
"""

from pathlib import Path
from typing import Optional, Sequence, Union

from docai_parser.models import Document
from docai_parser.utils.logger import get_logger
from .excel_exporter import ExcelExporter
from .json_exporter import JsonExporter

logger = get_logger(__name__)


class OutputHandler:
    """
    Unified output handler for parsed documents.

    Example:
        >>> handler = OutputHandler()
        >>> handler.save(document, "outputs/receipt.xlsx")
        'outputs/receipt.xlsx'
        >>> handler.save(document, "outputs/receipt.json")
        'outputs/receipt.json'
    """

    EXCEL_SUFFIXES = {'.xlsx'}
    JSON_SUFFIXES = {'.json'}

    def __init__(self) -> None:
        # Exporters are created on first use
        self._excel_exporter = None
        self._json_exporter = None

    @property
    def excel_exporter(self) -> ExcelExporter:
        if self._excel_exporter is None:
            self._excel_exporter = ExcelExporter()
        return self._excel_exporter

    @property
    def json_exporter(self) -> JsonExporter:
        if self._json_exporter is None:
            self._json_exporter = JsonExporter()
        return self._json_exporter

    def save(
        self,
        documents: Union[Document, Sequence[Document]],
        output_path: Union[str, Path]
    ) -> str:
        """
        Save documents to a file, choosing the format from its suffix.

        Args:
            documents: Single document or a sequence of documents.
            output_path: Target file ending in .xlsx or .json.

        Returns:
            Path to the created file.

        Raises:
            ValueError: If the suffix is not supported.
        """
        path = Path(output_path)
        suffix = path.suffix.lower()

        if suffix in self.EXCEL_SUFFIXES:
            return self.to_excel(documents, path.name, str(path.parent))
        if suffix in self.JSON_SUFFIXES:
            return self.to_json(documents, path.name, str(path.parent))

        raise ValueError(f"Unsupported output format: '{suffix or path.name}'")

    def to_excel(
        self,
        documents: Union[Document, Sequence[Document]],
        filename: Optional[str] = None,
        output_dir: Optional[str] = None
    ) -> str:
        """Export documents to an Excel file."""
        return self.excel_exporter.export(documents, filename, output_dir)

    def to_json(
        self,
        documents: Union[Document, Sequence[Document]],
        filename: Optional[str] = None,
        output_dir: Optional[str] = None
    ) -> str:
        """Export documents to a JSON file."""
        return self.json_exporter.export(documents, filename, output_dir)
