"""
Document AI Parser.

Turns Google Document AI JSON responses into typed Python objects:
Decimal amounts, calendar dates, timestamps and rebuilt line items.

Modules:
    - normalization: Payload structs and total decoders
    - models: Entity, LineItem and Document
    - processors: Per-processor response layouts
    - output_handler: JSON and Excel export
    - config / utils: Configuration, logging, exceptions, helpers

Architecture:
    raw JSON → parse_input → Processor → Entity / LineItem → Document
                                                               ↓
                                                         OutputHandler

Example:
    >>> import docai_parser
    >>> document = docai_parser.parse(open("response.json").read())
    >>> document.total_amount, document.currency
    (Decimal('162.440000000'), 'USD')
"""

import json
from typing import Any, Dict, Mapping, Optional, Union

from docai_parser.config import get_config
from docai_parser.models import Document, Entity, EntityType, LineItem, ParseIssue
from docai_parser.processors import PROCESSORS, ProcessorType, get_processor_class
from docai_parser.utils.exceptions import (
    DocumentParserError,
    InvalidInputTypeError,
    JsonParseError,
    MalformedDocumentError,
    UnknownProcessorError,
)
from docai_parser.utils.logger import get_logger

__version__ = "1.0.0"

logger = get_logger(__name__)


def parse_input(input_data: Union[str, bytes, Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Normalize parser input to a dict.

    Args:
        input_data: JSON text (str or bytes) or an already-parsed mapping.

    Returns:
        The parsed response. Mappings are returned as given.

    Raises:
        JsonParseError: If the text is not valid JSON or not a JSON object.
        InvalidInputTypeError: If input is neither text nor a mapping.
    """
    if isinstance(input_data, Mapping):
        return input_data

    if isinstance(input_data, (str, bytes, bytearray)):
        try:
            data = json.loads(input_data)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise JsonParseError(str(e)) from e

        if not isinstance(data, dict):
            raise JsonParseError(f"expected a JSON object, got {type(data).__name__}")
        return data

    raise InvalidInputTypeError(type(input_data))


def parse(
    input_data: Union[str, bytes, Mapping[str, Any]],
    processor_type: Optional[Union[ProcessorType, str]] = None
) -> Document:
    """
    Parse a Document AI response.

    Args:
        input_data: JSON text or an already-parsed mapping.
        processor_type: Processor that produced the response. Defaults to
            ``parser.default_processor`` (expense_parser).

    Returns:
        Parsed Document.

    Raises:
        JsonParseError: If input text is invalid JSON.
        InvalidInputTypeError: If input is neither text nor a mapping.
        UnknownProcessorError: If processor_type is not supported.
        MalformedDocumentError: If document.entities has the wrong shape.

    Example:
        >>> document = parse(json_text, processor_type="expense_parser")
        >>> document.supplier_name
        "Trader Joe's"
    """
    if processor_type is None:
        processor_type = get_config("parser.default_processor", ProcessorType.EXPENSE_PARSER.value)

    processor_class = get_processor_class(processor_type)
    raw_data = parse_input(input_data)

    logger.debug(f"Parsing response with {processor_class.__name__}")
    return processor_class(raw_data).parse()


__all__ = [
    'parse',
    'parse_input',
    'Document',
    'Entity',
    'EntityType',
    'LineItem',
    'ParseIssue',
    'PROCESSORS',
    'ProcessorType',
    'DocumentParserError',
    'InvalidInputTypeError',
    'JsonParseError',
    'MalformedDocumentError',
    'UnknownProcessorError',
]
