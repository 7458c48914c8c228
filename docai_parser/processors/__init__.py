"""
Processor Module for the Document AI Parser.

Maps each supported Document AI processor to the class that parses its
responses. The set is closed: new processors are added to ProcessorType
and PROCESSORS together.
"""

from enum import Enum
from typing import Dict, Type, Union

from docai_parser.utils.exceptions import UnknownProcessorError
from .base import BaseProcessor
from .expense_parser import ExpenseParser


class ProcessorType(str, Enum):
    """Supported Document AI processors."""
    EXPENSE_PARSER = "expense_parser"


PROCESSORS: Dict[ProcessorType, Type[BaseProcessor]] = {
    ProcessorType.EXPENSE_PARSER: ExpenseParser,
}


def get_processor_class(processor_type: Union[ProcessorType, str]) -> Type[BaseProcessor]:
    """
    Resolve a processor identifier to its class.

    Args:
        processor_type: ProcessorType member or its string value.

    Returns:
        Processor class.

    Raises:
        UnknownProcessorError: If the identifier is not supported.
    """
    try:
        key = ProcessorType(processor_type)
    except ValueError:
        raise UnknownProcessorError(
            processor_type, [p.value for p in ProcessorType]
        ) from None

    processor_class = PROCESSORS.get(key)
    if processor_class is None:
        raise UnknownProcessorError(processor_type, [p.value for p in PROCESSORS])
    return processor_class


__all__ = [
    'BaseProcessor',
    'ExpenseParser',
    'ProcessorType',
    'PROCESSORS',
    'get_processor_class'
]
