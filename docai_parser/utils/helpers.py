"""
Helper Utilities Module.

Functions:
    - dig: Safe nested lookup through mappings and sequences
    - to_serializable: Convert Decimal/date/datetime values for JSON
    - ensure_directory: Create directory if it doesn't exist
    - generate_timestamp: Generate formatted timestamps
"""

from datetime import date, datetime, time
from decimal import Decimal
from pathlib import Path
from typing import Any, Mapping, Sequence, Union


def dig(data: Any, *keys: Union[str, int]) -> Any:
    """
    Walk nested mappings/sequences, returning None at the first miss.

    String keys index mappings, integer keys index lists. Any shape
    mismatch along the way yields None instead of raising.

    Args:
        data: Root structure.
        *keys: Path of keys and indexes.

    Returns:
        The value at the path, or None.

    Example:
        >>> dig({"pageAnchor": {"pageRefs": [{"page": "1"}]}}, "pageAnchor", "pageRefs", 0, "page")
        '1'
    """
    current = data
    for key in keys:
        if isinstance(key, int):
            if not isinstance(current, Sequence) or isinstance(current, (str, bytes)):
                return None
            if not -len(current) <= key < len(current):
                return None
            current = current[key]
        else:
            if not isinstance(current, Mapping):
                return None
            current = current.get(key)
        if current is None:
            return None
    return current


def to_serializable(value: Any) -> Any:
    """
    Convert a typed value into something json.dumps accepts.

    Decimals become strings (to keep exact precision), dates and times
    become ISO 8601 strings. Other values pass through unchanged.

    Args:
        value: Value to convert.

    Returns:
        JSON-compatible value.

    Example:
        >>> to_serializable(Decimal("162.440000000"))
        '162.44'
    """
    if isinstance(value, Decimal):
        return format(value.normalize(), 'f')
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return value


def ensure_directory(path: Union[str, Path]) -> Path:
    """
    Ensure a directory exists, creating it and its parents if necessary.

    Args:
        path: Directory path to ensure exists.

    Returns:
        Path object pointing to the directory.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def generate_timestamp(format_str: str = "%Y%m%d_%H%M%S") -> str:
    """
    Generate a formatted timestamp string.

    Args:
        format_str: strftime format string.

    Returns:
        Formatted timestamp string.
    """
    return datetime.now().strftime(format_str)
