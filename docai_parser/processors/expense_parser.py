"""
Expense Parser Processor.

Handles responses of the Expense Parser processor. Entities whose type
is the line-item sentinel (``line_item`` by default, see
``parser.line_item_type``) become LineItems; every other entity becomes
an Entity. Both keep source order.
"""

from dataclasses import replace
from typing import Any, Dict, List, Mapping, Optional

from docai_parser.config import get_config
from docai_parser.models import Document, Entity, LineItem, ParseIssue, build_line_item
from docai_parser.utils.exceptions import MalformedDocumentError
from docai_parser.utils.helpers import dig
from docai_parser.utils.logger import get_logger
from .base import BaseProcessor

logger = get_logger(__name__)


class ExpenseParser(BaseProcessor):
    """
    Processor for Google's Expense Parser.

    Example:
        >>> document = ExpenseParser(raw_data).parse()
        >>> len(document.line_items)
        39
    """

    def __init__(self, raw_data: Dict[str, Any], line_item_type: Optional[str] = None) -> None:
        """
        Initialize the processor.

        Args:
            raw_data: The parsed JSON response.
            line_item_type: Override for the line-item sentinel type.
        """
        super().__init__(raw_data)
        self.line_item_type = line_item_type or get_config("parser.line_item_type", "line_item")

    def parse(self) -> Document:
        """
        Split ``document.entities`` into entities and line items.

        Returns:
            Document built from the response.

        Raises:
            MalformedDocumentError: If entities is not a list or holds a
                record that is not a mapping.
        """
        raw_entities = dig(self.raw_data, 'document', 'entities')
        if raw_entities is None:
            raw_entities = []
        elif not isinstance(raw_entities, list):
            raise MalformedDocumentError(
                f"document.entities must be a list, got {type(raw_entities).__name__}"
            )

        entities: List[Entity] = []
        line_items: List[LineItem] = []
        issues: List[ParseIssue] = []

        for index, record in enumerate(raw_entities):
            if not isinstance(record, Mapping):
                raise MalformedDocumentError(
                    f"entity record must be a mapping, got {type(record).__name__}",
                    index=index
                )

            if record.get('type') == self.line_item_type:
                result = build_line_item(record)
                issues.extend(
                    replace(issue, line_item_index=len(line_items))
                    for issue in result.issues
                )
                line_items.append(result.line_item)
            else:
                entities.append(Entity.from_dict(record))

        logger.debug(
            f"Parsed {len(entities)} entities and {len(line_items)} line items"
        )
        if issues:
            logger.warning(f"{len(issues)} line item issue(s) while parsing document")

        return Document(
            entities=tuple(entities),
            line_items=tuple(line_items),
            raw_data=self.raw_data,
            issues=tuple(issues)
        )
