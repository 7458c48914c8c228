"""
Line Item Data Class and Builder.

The Expense Parser reports each purchase line as a ``line_item`` entity
whose ``properties`` list holds the per-line fields:

    {"type": "line_item", "mentionText": "BANANA EACH 1.15",
     "properties": [
         {"type": "line_item/description", "mentionText": "BANANA EACH"},
         {"type": "line_item/amount",
          "normalizedValue": {"moneyValue": {"units": "1", "nanos": 150000000}}}
     ]}

build_line_item() folds those properties into a LineItem. Building is
best-effort: a property that cannot be handled is recorded as a
ParseIssue and the rest of the line is still built.

Classes:
    LineItemProperty: Known ``line_item/*`` property tags
    ParseIssue: A non-fatal problem met while building
    LineItem: One purchase line
    LineItemBuildResult: A LineItem plus its issues
"""

import math
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from docai_parser.utils.helpers import to_serializable
from docai_parser.utils.logger import get_logger
from .entity import Entity

logger = get_logger(__name__)

Quantity = Union[int, float, str]


class LineItemProperty(str, Enum):
    """Property tags found inside a ``line_item`` group."""
    DESCRIPTION = "line_item/description"
    QUANTITY = "line_item/quantity"
    UNIT = "line_item/unit"
    UNIT_PRICE = "line_item/unit_price"
    AMOUNT = "line_item/amount"
    PRODUCT_CODE = "line_item/product_code"
    OTHER = "line_item/other"

    @classmethod
    def from_tag(cls, tag: Optional[str]) -> 'LineItemProperty':
        """Map a raw tag to its member, or OTHER."""
        try:
            return cls(tag)
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class ParseIssue:
    """
    A non-fatal problem found while building a line item.

    Attributes:
        message: What went wrong.
        index: Position of the offending property, None for the group itself.
        property_type: Type tag of the offending property, if known.
        line_item_index: Position of the line item within its document,
            set when issues are collected onto a Document.
    """
    message: str
    index: Optional[int] = None
    property_type: Optional[str] = None
    line_item_index: Optional[int] = None

    def __str__(self) -> str:
        line_item = "line item"
        if self.line_item_index is not None:
            line_item = f"line item {self.line_item_index}"

        if self.index is None:
            where = line_item
        elif self.line_item_index is not None:
            where = f"{line_item}, property {self.index}"
        else:
            where = f"property {self.index}"
        if self.property_type:
            where = f"{where} ({self.property_type})"
        return f"{where}: {self.message}"


def parse_quantity(text: Any) -> Optional[Quantity]:
    """
    Read a quantity as int, then float, then keep the text.

    Args:
        text: Quantity text from the property entity.

    Returns:
        int, float, the original value, or None when there is no text.

    Example:
        >>> parse_quantity("5"), parse_quantity("2.5"), parse_quantity("two")
        (5, 2.5, 'two')
    """
    if text is None:
        return None

    try:
        return int(text)
    except (TypeError, ValueError):
        pass

    try:
        value = float(text)
    except (TypeError, ValueError):
        return text

    # "nan"/"inf" parse as floats but aren't quantities
    return value if math.isfinite(value) else text


def _is_numeric(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class LineItem:
    """
    One purchase line of an expense document.

    Attributes:
        description: Item description
        quantity: int or float when parseable, else the raw text
        unit: Unit of measure
        unit_price: Price per unit
        amount: Line total; computed from unit_price × quantity when absent
        product_code: SKU or product code
        other_properties: Properties with tags this version doesn't know
        issues: Problems met while building the line
        raw_line_item_entity: The ``line_item`` record
        raw_properties: Its ``properties`` list
    """
    description: Optional[str] = None
    quantity: Optional[Quantity] = None
    unit: Optional[str] = None
    unit_price: Optional[Decimal] = None
    amount: Optional[Decimal] = None
    product_code: Optional[str] = None
    other_properties: Tuple[Entity, ...] = ()
    issues: Tuple[ParseIssue, ...] = ()
    raw_line_item_entity: Dict[str, Any] = field(default_factory=dict, repr=False)
    raw_properties: Tuple[Any, ...] = field(default=(), repr=False)

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> 'LineItem':
        """Build a line item, keeping issues on ``LineItem.issues``."""
        return build_line_item(record).line_item

    def to_dict(self) -> Dict[str, Any]:
        """Typed summary of the line for export."""
        return {
            'description': self.description,
            'quantity': self.quantity,
            'unit': self.unit,
            'unit_price': to_serializable(self.unit_price),
            'amount': to_serializable(self.amount),
            'product_code': self.product_code,
        }


@dataclass(frozen=True)
class LineItemBuildResult:
    """A built LineItem together with the issues met while building it."""
    line_item: LineItem
    issues: Tuple[ParseIssue, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.issues


def build_line_item(record: Mapping[str, Any]) -> LineItemBuildResult:
    """
    Fold a ``line_item`` group record into a LineItem.

    Each property is wrapped as an Entity and dispatched on its tag.
    Unknown tags are kept in ``other_properties``. A property that raises
    is logged, recorded as a ParseIssue and skipped; if that leaves the
    line without a description, the group's own mention text is used.

    Args:
        record: The raw ``line_item`` entity record.

    Returns:
        LineItemBuildResult with the line item and any issues.

    Raises:
        TypeError: If record is not a mapping.
    """
    if not isinstance(record, Mapping):
        raise TypeError(
            f"Line item record must be a mapping, got {type(record).__name__}"
        )

    issues: List[ParseIssue] = []
    fields: Dict[str, Any] = {}
    other_properties: List[Entity] = []

    raw_properties = record.get('properties') or []
    if not isinstance(raw_properties, list):
        issues.append(ParseIssue(
            f"properties must be a list, got {type(raw_properties).__name__}"
        ))
        raw_properties = []

    for index, prop in enumerate(raw_properties):
        tag = prop.get('type') if isinstance(prop, Mapping) else None
        try:
            entity = Entity.from_dict(prop)
            kind = LineItemProperty.from_tag(entity.type)

            if kind == LineItemProperty.DESCRIPTION:
                fields['description'] = entity.text()
            elif kind == LineItemProperty.QUANTITY:
                fields['quantity'] = parse_quantity(entity.text())
            elif kind == LineItemProperty.UNIT:
                fields['unit'] = entity.text()
            elif kind == LineItemProperty.UNIT_PRICE:
                fields['unit_price'] = entity.amount()
            elif kind == LineItemProperty.AMOUNT:
                fields['amount'] = entity.amount()
            elif kind == LineItemProperty.PRODUCT_CODE:
                fields['product_code'] = entity.text()
            else:
                other_properties.append(entity)
        except Exception as e:
            logger.warning(f"Error parsing line item property {index} ({tag}): {e}")
            issues.append(ParseIssue(str(e), index=index, property_type=tag))

    unit_price = fields.get('unit_price')
    quantity = fields.get('quantity')
    if fields.get('amount') is None and unit_price is not None and _is_numeric(quantity):
        try:
            fields['amount'] = unit_price * Decimal(str(quantity))
        except Exception as e:
            logger.warning(f"Could not compute line item amount: {e}")
            issues.append(ParseIssue(f"amount back-fill failed: {e}"))

    if issues and fields.get('description') is None:
        fields['description'] = record.get('mentionText')

    line_item = LineItem(
        other_properties=tuple(other_properties),
        issues=tuple(issues),
        raw_line_item_entity=record,
        raw_properties=tuple(raw_properties),
        **fields
    )
    return LineItemBuildResult(line_item=line_item, issues=tuple(issues))
