"""
Base Processor Module.

A processor knows how one Document AI processor lays out its response
and turns the raw dict into a Document.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from docai_parser.models import Document


class BaseProcessor(ABC):
    """
    Abstract base class for response processors.

    Attributes:
        raw_data: The parsed JSON response.
    """

    def __init__(self, raw_data: Dict[str, Any]) -> None:
        self.raw_data = raw_data

    @abstractmethod
    def parse(self) -> Document:
        """
        Parse the raw data into a Document.

        Returns:
            Parsed Document.
        """
        raise NotImplementedError
