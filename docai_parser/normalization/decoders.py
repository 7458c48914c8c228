"""
Normalized Value Decoders.

Pure functions turning payload structs into exact Python values:

    decode_money  -> Decimal
    decode_date   -> datetime.date
    decode_time   -> datetime.datetime
    decode_text   -> str

Every decoder is total: malformed or missing input gives None, never an
exception. Failures are logged at DEBUG level.
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from docai_parser.utils.logger import get_logger
from .values import DateValue, MoneyValue, TimeValue

logger = get_logger(__name__)

NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MICROSECOND = 1_000
MAX_NANOS = NANOS_PER_SECOND - 1


def _to_int(value: Any) -> Optional[int]:
    """
    Coerce a JSON scalar to int.

    Accepts ints, integral floats and integer strings. Booleans and
    anything else give None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def decode_money(money: Optional[MoneyValue]) -> Optional[Decimal]:
    """
    Convert a money payload to an exact Decimal.

    The whole units and the nanos padded to nine digits are joined into
    one decimal string, so no float ever touches the amount. Missing
    units count as "0" and missing nanos as 0. Negative amounts carry the
    sign on both fields (units="-1", nanos=-500000000 is -1.5); mixed
    signs are rejected.

    Args:
        money: Payload from ``moneyValue``.

    Returns:
        Decimal amount, or None if the payload is missing or invalid.

    Example:
        >>> decode_money(MoneyValue(units="162", nanos=440000000))
        Decimal('162.440000000')
    """
    if money is None:
        return None

    units = money.units if money.units is not None else "0"
    nanos = _to_int(money.nanos if money.nanos is not None else 0)

    if nanos is None or abs(nanos) > MAX_NANOS:
        logger.debug(f"Invalid money nanos: {money.nanos!r}")
        return None

    if isinstance(units, bool) or not isinstance(units, (str, int)):
        logger.debug(f"Invalid money units: {units!r}")
        return None

    units_text = str(units).strip()
    negative = units_text.startswith('-')
    digits = units_text.lstrip('+-')

    if not digits.isdecimal() or len(units_text) - len(digits) > 1:
        logger.debug(f"Invalid money units: {units!r}")
        return None

    if nanos < 0:
        if not negative and digits.strip('0'):
            logger.debug(f"Money sign mismatch: units={units!r}, nanos={nanos}")
            return None
        negative = True
    elif nanos > 0 and negative:
        logger.debug(f"Money sign mismatch: units={units!r}, nanos={nanos}")
        return None

    sign = '-' if negative else ''

    try:
        return Decimal(f"{sign}{digits}.{abs(nanos):09d}")
    except InvalidOperation:
        logger.debug(f"Could not build decimal from units={units!r}, nanos={nanos}")
        return None


def decode_date(value: Optional[DateValue]) -> Optional[date]:
    """
    Convert a date payload to a calendar date.

    Args:
        value: Payload from ``dateValue``.

    Returns:
        date, or None if a field is missing or the day doesn't exist
        (month 13, April 31, ...).
    """
    if value is None:
        return None

    year, month, day = _to_int(value.year), _to_int(value.month), _to_int(value.day)
    if year is None or month is None or day is None:
        return None

    try:
        return date(year, month, day)
    except (ValueError, OverflowError) as e:
        logger.debug(f"Invalid date {value}: {e}")
        return None


def decode_time(value: Optional[TimeValue], base_date: Optional[date] = None) -> Optional[datetime]:
    """
    Convert a clock payload to a timestamp on a given day.

    Args:
        value: Payload from ``datetimeValue`` or ``timeValue``.
        base_date: Day to anchor the time to. Defaults to today.

    Returns:
        Naive datetime with microsecond precision, or None if the
        payload is missing or out of range.
    """
    if value is None:
        return None

    fields = [
        _to_int(v if v is not None else 0)
        for v in (value.hours, value.minutes, value.seconds, value.nanos)
    ]
    if any(f is None for f in fields):
        return None
    hours, minutes, seconds, nanos = fields

    if not 0 <= nanos <= MAX_NANOS:
        return None

    if base_date is None:
        base_date = date.today()

    try:
        return datetime(
            base_date.year, base_date.month, base_date.day,
            hours, minutes, seconds, nanos // NANOS_PER_MICROSECOND
        )
    except (ValueError, OverflowError, TypeError, AttributeError) as e:
        logger.debug(f"Invalid time {value} on {base_date!r}: {e}")
        return None


def decode_text(normalized_text: Optional[str], mention_text: Optional[str] = None) -> Optional[str]:
    """Normalized text when present, otherwise the mention text."""
    if normalized_text is not None:
        return normalized_text
    return mention_text
