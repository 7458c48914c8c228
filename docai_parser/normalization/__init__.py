"""
Normalization Module for the Document AI Parser.

This module provides:
    - Payload structs for Document AI normalized values
    - Total decoders producing Decimal, date, datetime and text values
"""

from .values import MoneyValue, DateValue, TimeValue, NormalizedValue
from .decoders import decode_money, decode_date, decode_time, decode_text

__all__ = [
    'MoneyValue',
    'DateValue',
    'TimeValue',
    'NormalizedValue',
    'decode_money',
    'decode_date',
    'decode_time',
    'decode_text'
]
