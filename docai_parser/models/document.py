"""
Document Data Class.

A Document holds everything parsed from one Document AI response: the
plain entities, the line items rebuilt from ``line_item`` groups and the
raw input. Header fields of an expense (supplier, dates, totals,
payment) are read through typed lookups on the entity list.

Example:
    >>> document = parse(response_json)
    >>> document.supplier_name
    "Trader Joe's"
    >>> document.total_amount
    Decimal('162.440000000')
    >>> [item.description for item in document.line_items]
"""

import datetime
import json
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple, Union

from docai_parser.utils.helpers import to_serializable
from .entity import Entity, EntityType
from .line_item import LineItem, ParseIssue

EntityTypeLike = Union[EntityType, str]


@dataclass(frozen=True)
class Document:
    """
    Parsed expense document.

    Attributes:
        entities: Non-line-item entities in source order
        line_items: Line items in source order
        raw_data: The input the document was parsed from
        issues: Problems met while building line items
    """
    entities: Tuple[Entity, ...] = ()
    line_items: Tuple[LineItem, ...] = ()
    raw_data: Dict[str, Any] = field(default_factory=dict, repr=False)
    issues: Tuple[ParseIssue, ...] = ()

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    @staticmethod
    def _tag(entity_type: EntityTypeLike) -> str:
        if isinstance(entity_type, EntityType):
            return entity_type.value
        return entity_type

    def find_entity(self, entity_type: EntityTypeLike) -> Optional[Entity]:
        """
        Find the first entity with the given type.

        Args:
            entity_type: Tag string or EntityType member.

        Returns:
            Entity, or None if there is none.
        """
        tag = self._tag(entity_type)
        return next((e for e in self.entities if e.type == tag), None)

    def find_entities(self, entity_type: EntityTypeLike) -> List[Entity]:
        """
        Find all entities with the given type, in source order.

        Args:
            entity_type: Tag string or EntityType member.

        Returns:
            List of entities, empty if there are none.
        """
        tag = self._tag(entity_type)
        return [e for e in self.entities if e.type == tag]

    def _text_of(self, entity_type: EntityType) -> Optional[str]:
        entity = self.find_entity(entity_type)
        return entity.text() if entity else None

    def _amount_of(self, entity_type: EntityType) -> Optional[Decimal]:
        entity = self.find_entity(entity_type)
        return entity.amount() if entity else None

    # -------------------------------------------------------------------------
    # Supplier
    # -------------------------------------------------------------------------

    @property
    def supplier_name(self) -> Optional[str]:
        return self._text_of(EntityType.SUPPLIER_NAME)

    @property
    def supplier_address(self) -> Optional[str]:
        """Address as the service's normalized text; components aren't parsed."""
        return self._text_of(EntityType.SUPPLIER_ADDRESS)

    @property
    def supplier_phone(self) -> Optional[str]:
        return self._text_of(EntityType.SUPPLIER_PHONE)

    @property
    def supplier_website(self) -> Optional[str]:
        return self._text_of(EntityType.SUPPLIER_WEBSITE)

    # -------------------------------------------------------------------------
    # Dates
    # -------------------------------------------------------------------------

    @property
    def receipt_date(self) -> Optional[datetime.date]:
        entity = self.find_entity(EntityType.RECEIPT_DATE)
        return entity.date() if entity else None

    @property
    def purchase_time(self) -> Optional[datetime.datetime]:
        """Purchase time on the receipt date, or on today if there is none."""
        entity = self.find_entity(EntityType.PURCHASE_TIME)
        if entity is None:
            return None
        return entity.time(self.receipt_date or datetime.date.today())

    # -------------------------------------------------------------------------
    # Amounts
    # -------------------------------------------------------------------------

    @property
    def total_amount(self) -> Optional[Decimal]:
        return self._amount_of(EntityType.TOTAL_AMOUNT)

    @property
    def total_tax_amount(self) -> Optional[Decimal]:
        return self._amount_of(EntityType.TOTAL_TAX_AMOUNT)

    @property
    def net_amount(self) -> Optional[Decimal]:
        return self._amount_of(EntityType.NET_AMOUNT)

    @property
    def currency(self) -> Optional[str]:
        """
        Currency of the document.

        Uses the currency entity's normalized text (or its mention text);
        without one, falls back to the currency code of the total amount.
        """
        currency_entity = self.find_entity(EntityType.CURRENCY)
        if currency_entity is not None:
            normalized_text = currency_entity.normalized('text')
            if normalized_text is not None:
                return normalized_text
            return currency_entity.mention_text

        total_entity = self.find_entity(EntityType.TOTAL_AMOUNT)
        if total_entity is None or total_entity.normalized_value is None:
            return None
        money = total_entity.normalized_value.money
        return money.currency_code if money else None

    # -------------------------------------------------------------------------
    # Payment
    # -------------------------------------------------------------------------

    @property
    def payment_type(self) -> Optional[str]:
        return self._text_of(EntityType.PAYMENT_TYPE)

    @property
    def credit_card_last_four_digits(self) -> Optional[str]:
        return self._text_of(EntityType.CREDIT_CARD_LAST_FOUR_DIGITS)

    @property
    def payment_authorization_id(self) -> Optional[str]:
        return self._text_of(EntityType.PAYMENT_AUTHORIZATION_ID)

    # -------------------------------------------------------------------------
    # Export
    # -------------------------------------------------------------------------

    @property
    def fields(self) -> Dict[str, Any]:
        """Header fields as typed values."""
        return {
            'supplier_name': self.supplier_name,
            'supplier_address': self.supplier_address,
            'supplier_phone': self.supplier_phone,
            'supplier_website': self.supplier_website,
            'receipt_date': self.receipt_date,
            'purchase_time': self.purchase_time,
            'total_amount': self.total_amount,
            'total_tax_amount': self.total_tax_amount,
            'net_amount': self.net_amount,
            'currency': self.currency,
            'payment_type': self.payment_type,
            'credit_card_last_four_digits': self.credit_card_last_four_digits,
            'payment_authorization_id': self.payment_authorization_id,
        }

    @property
    def missing_fields(self) -> List[str]:
        """Header fields the document has no value for."""
        return [name for name, value in self.fields.items() if value is None]

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a JSON-compatible dictionary.

        Decimals are rendered as strings and dates/times in ISO 8601.
        """
        result = {name: to_serializable(value) for name, value in self.fields.items()}
        result['line_items'] = [item.to_dict() for item in self.line_items]
        result['entity_count'] = len(self.entities)
        result['issues'] = [str(issue) for issue in self.issues]
        return result

    def to_json(self, indent: int = 2) -> str:
        """
        Convert to a JSON string.

        Args:
            indent: JSON indentation level.
        """
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def __repr__(self) -> str:
        return (
            f"Document("
            f"supplier={self.supplier_name!r}, "
            f"total={self.total_amount}, "
            f"entities={len(self.entities)}, "
            f"line_items={len(self.line_items)})"
        )
