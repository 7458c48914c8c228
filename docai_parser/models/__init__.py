"""
Domain Models for the Document AI Parser.

Classes:
    Entity: One detected field
    LineItem: One purchase line rebuilt from a line_item group
    Document: Everything parsed from one response
"""

from .entity import Entity, EntityType
from .line_item import (
    LineItem,
    LineItemBuildResult,
    LineItemProperty,
    ParseIssue,
    build_line_item,
    parse_quantity,
)
from .document import Document

__all__ = [
    'Entity',
    'EntityType',
    'LineItem',
    'LineItemBuildResult',
    'LineItemProperty',
    'ParseIssue',
    'build_line_item',
    'parse_quantity',
    'Document'
]
