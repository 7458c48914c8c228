"""
Normalized Value Payloads.

Document AI attaches a ``normalizedValue`` object to many entities. It
carries exactly one typed payload next to a text rendering:

    {"moneyValue": {"currencyCode": "USD", "units": "162", "nanos": 440000000},
     "text": "162.44"}

The classes here pull each payload out of the raw dict once, when an
entity is built. Field values are kept as the service sent them; turning
them into Decimal/date/datetime is the job of the decoders, which
validate and never raise.

Classes:
    MoneyValue: google.type.Money (units, nanos, currencyCode)
    DateValue: google.type.Date (year, month, day)
    TimeValue: google.type.TimeOfDay / DateTime clock fields
    NormalizedValue: the union, with the service's text rendering
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class MoneyValue:
    """
    Money payload.

    Attributes:
        units: Whole units, usually a string ("162").
        nanos: Nano units of the amount, 0..999,999,999 in magnitude.
        currency_code: ISO 4217 code, e.g. "USD".
    """
    units: Any = None
    nanos: Any = None
    currency_code: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> Optional['MoneyValue']:
        if not isinstance(data, Mapping):
            return None
        return cls(
            units=data.get('units'),
            nanos=data.get('nanos'),
            currency_code=data.get('currencyCode')
        )


@dataclass(frozen=True)
class DateValue:
    """Calendar date payload; any field may be missing."""
    year: Any = None
    month: Any = None
    day: Any = None

    @classmethod
    def from_dict(cls, data: Any) -> Optional['DateValue']:
        if not isinstance(data, Mapping):
            return None
        return cls(
            year=data.get('year'),
            month=data.get('month'),
            day=data.get('day')
        )


@dataclass(frozen=True)
class TimeValue:
    """Clock payload from ``datetimeValue`` or ``timeValue``."""
    hours: Any = None
    minutes: Any = None
    seconds: Any = None
    nanos: Any = None

    @classmethod
    def from_dict(cls, data: Any) -> Optional['TimeValue']:
        if not isinstance(data, Mapping):
            return None
        return cls(
            hours=data.get('hours'),
            minutes=data.get('minutes'),
            seconds=data.get('seconds'),
            nanos=data.get('nanos')
        )


@dataclass(frozen=True)
class NormalizedValue:
    """
    Decoded ``normalizedValue`` object.

    Attributes:
        money: Payload of ``moneyValue``.
        date: Payload of ``dateValue``.
        datetime: Payload of ``datetimeValue``.
        time: Payload of ``timeValue``.
        text: The service's text rendering of the value.
        raw: The original dict.
    """
    money: Optional[MoneyValue] = None
    date: Optional[DateValue] = None
    datetime: Optional[TimeValue] = None
    time: Optional[TimeValue] = None
    text: Optional[str] = None
    raw: Optional[Dict[str, Any]] = None

    @property
    def clock(self) -> Optional[TimeValue]:
        """Time-of-day payload, preferring ``datetimeValue`` over ``timeValue``."""
        return self.datetime or self.time

    @classmethod
    def from_dict(cls, data: Any) -> Optional['NormalizedValue']:
        """
        Decode a raw ``normalizedValue`` dict.

        Args:
            data: The raw value; anything but a mapping yields None.

        Returns:
            NormalizedValue or None.
        """
        if not isinstance(data, Mapping):
            return None

        text = data.get('text')
        return cls(
            money=MoneyValue.from_dict(data.get('moneyValue')),
            date=DateValue.from_dict(data.get('dateValue')),
            datetime=TimeValue.from_dict(data.get('datetimeValue')),
            time=TimeValue.from_dict(data.get('timeValue')),
            text=text if isinstance(text, str) else None,
            raw=data
        )
