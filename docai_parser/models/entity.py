"""
Entity Data Class.

An Entity wraps one record of ``document.entities`` from a Document AI
response: its type tag, mention text, confidence, normalized value and
position on the page. Typed accessors (amount, date, time, text) go
through the normalization decoders and return None instead of raising.

Classes:
    EntityType: Known Expense Parser entity tags
    Entity: One detected field
"""

import datetime
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

from docai_parser.normalization import (
    NormalizedValue,
    decode_date,
    decode_money,
    decode_text,
    decode_time,
)
from docai_parser.utils.helpers import dig, to_serializable


class EntityType(str, Enum):
    """
    Entity tags emitted by the Expense Parser.

    Tags the enum doesn't know map to OTHER; the original string stays
    on Entity.type, so nothing is lost for newer processor versions.
    """
    SUPPLIER_NAME = "supplier_name"
    SUPPLIER_ADDRESS = "supplier_address"
    SUPPLIER_PHONE = "supplier_phone"
    SUPPLIER_WEBSITE = "supplier_website"
    RECEIPT_DATE = "receipt_date"
    PURCHASE_TIME = "purchase_time"
    TOTAL_AMOUNT = "total_amount"
    TOTAL_TAX_AMOUNT = "total_tax_amount"
    NET_AMOUNT = "net_amount"
    CURRENCY = "currency"
    PAYMENT_TYPE = "payment_type"
    CREDIT_CARD_LAST_FOUR_DIGITS = "credit_card_last_four_digits"
    PAYMENT_AUTHORIZATION_ID = "payment_authorization_id"
    LINE_ITEM = "line_item"
    OTHER = "other"

    @classmethod
    def from_tag(cls, tag: Optional[str]) -> 'EntityType':
        """Map a raw tag to its member, or OTHER."""
        try:
            return cls(tag)
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class Entity:
    """
    One detected field of a Document AI response.

    Attributes:
        type: Raw type tag (e.g. "total_amount"), None if the record has none
        mention_text: Text span the service associated with the field
        confidence: Service confidence, passed through unchanged
        normalized_value: Decoded normalizedValue payloads
        bounding_poly: Normalized vertices of the first page reference
        page: Page index of the first page reference
        raw_entity: The record this entity was built from

    Example:
        >>> entity = Entity.from_dict({
        ...     "type": "total_amount",
        ...     "mentionText": "162.44",
        ...     "normalizedValue": {"moneyValue": {"units": "162", "nanos": 440000000}}
        ... })
        >>> entity.amount()
        Decimal('162.440000000')
    """
    type: Optional[str] = None
    mention_text: Optional[str] = None
    confidence: Optional[float] = None
    normalized_value: Optional[NormalizedValue] = None
    bounding_poly: Optional[Tuple[Dict[str, Any], ...]] = None
    page: Any = None
    raw_entity: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> 'Entity':
        """
        Build an Entity from a raw entity record.

        Args:
            record: One item of ``document.entities`` or of a line item's
                ``properties``.

        Returns:
            Entity instance.

        Raises:
            TypeError: If record is not a mapping.
        """
        if not isinstance(record, Mapping):
            raise TypeError(
                f"Entity record must be a mapping, got {type(record).__name__}"
            )

        vertices = dig(record, 'pageAnchor', 'pageRefs', 0, 'boundingPoly', 'normalizedVertices')

        return cls(
            type=record.get('type'),
            mention_text=record.get('mentionText'),
            confidence=record.get('confidence'),
            normalized_value=NormalizedValue.from_dict(record.get('normalizedValue')),
            bounding_poly=tuple(vertices) if isinstance(vertices, list) else None,
            page=dig(record, 'pageAnchor', 'pageRefs', 0, 'page'),
            raw_entity=record
        )

    @property
    def kind(self) -> EntityType:
        """Closed-set view of the type tag."""
        return EntityType.from_tag(self.type)

    def normalized(self, key: str) -> Any:
        """
        Get one field of the raw normalizedValue object.

        Args:
            key: e.g. "moneyValue", "dateValue", "text".

        Returns:
            The raw field value, or None.
        """
        if self.normalized_value is None or self.normalized_value.raw is None:
            return None
        return self.normalized_value.raw.get(key)

    def amount(self) -> Optional[Decimal]:
        """Exact amount of a ``moneyValue``, or None."""
        if self.normalized_value is None:
            return None
        return decode_money(self.normalized_value.money)

    def date(self) -> Optional[datetime.date]:
        """Calendar date of a ``dateValue``, or None."""
        if self.normalized_value is None:
            return None
        return decode_date(self.normalized_value.date)

    def time(self, base_date: Optional[datetime.date] = None) -> Optional[datetime.datetime]:
        """
        Timestamp of a ``datetimeValue``/``timeValue``, anchored to a day.

        Args:
            base_date: Day the time belongs to. Defaults to today.

        Returns:
            datetime or None.
        """
        if self.normalized_value is None:
            return None
        return decode_time(self.normalized_value.clock, base_date)

    def text(self) -> Optional[str]:
        """Normalized text, falling back to the mention text."""
        normalized_text = self.normalized_value.text if self.normalized_value else None
        return decode_text(normalized_text, self.mention_text)

    def to_dict(self) -> Dict[str, Any]:
        """Typed summary of the entity for export."""
        return {
            'type': self.type,
            'mention_text': self.mention_text,
            'confidence': self.confidence,
            'text': self.text(),
            'amount': to_serializable(self.amount()),
            'date': to_serializable(self.date()),
        }

    def __repr__(self) -> str:
        return f"Entity(type={self.type!r}, mention_text={self.mention_text!r})"
