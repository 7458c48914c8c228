"""
JSON Exporter Module.

Writes Document summaries (Document.to_dict) to a JSON file. A single
document is written as an object, several as an array.
"""

import json
from pathlib import Path
from typing import Optional, Sequence, Union

from docai_parser.config import get_config
from docai_parser.models import Document
from docai_parser.utils.exceptions import JsonExportError
from docai_parser.utils.helpers import ensure_directory, generate_timestamp
from docai_parser.utils.logger import get_logger

logger = get_logger(__name__)


class JsonExporter:
    """
    Exports parsed documents as JSON.

    Example:
        >>> JsonExporter().export(document, "receipt.json")
    """

    def __init__(self) -> None:
        self.output_dir = Path(get_config("paths.output_dir", "outputs"))
        self.indent = get_config("output.json.indent", 2)

    def export(
        self,
        documents: Union[Document, Sequence[Document]],
        filename: Optional[str] = None,
        output_dir: Optional[str] = None
    ) -> str:
        """
        Export documents to a JSON file.

        Args:
            documents: Single document or a sequence of documents.
            filename: Output filename. If None, auto-generated.
            output_dir: Output directory. If None, uses ``paths.output_dir``.

        Returns:
            Path to the created JSON file.

        Raises:
            JsonExportError: If writing fails.
        """
        if isinstance(documents, Document):
            payload = documents.to_dict()
            count = 1
        else:
            payload = [doc.to_dict() for doc in documents]
            count = len(payload)

        out_dir = ensure_directory(output_dir or self.output_dir)
        filepath = out_dir / (filename or f"expense_documents_{generate_timestamp()}.json")

        try:
            with open(filepath, 'w', encoding='utf-8') as f:
                json.dump(payload, f, indent=self.indent, ensure_ascii=False)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"JSON export failed: {e}")
            raise JsonExportError(str(filepath), str(e)) from e

        logger.info(f"JSON file saved: {filepath} ({count} documents)")
        return str(filepath)
