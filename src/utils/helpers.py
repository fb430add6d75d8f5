"""
Helper Utilities Module.

This module provides common utility functions used throughout the
boleto decoder. Functions here should be generic and reusable across
different modules.

Functions:
    - to_digit_list: Convert a digit string to a list of ints
    - parse_iso_date: Parse configuration/CLI dates
    - format_brl_amount: Render a Decimal in Brazilian notation
"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Sequence, Union

from dateutil import parser as date_parser


def to_digit_list(digits: Union[str, Sequence[int]]) -> List[int]:
    """
    Convert a digit string (or sequence of ints) to a list of ints.

    Args:
        digits: String of characters 0-9, or a sequence of ints 0-9.

    Returns:
        List of ints in the same order.

    Raises:
        ValueError: If any element is not a single decimal digit.

    Example:
        >>> to_digit_list("0019")
        [0, 0, 1, 9]
    """
    if isinstance(digits, str):
        if not all(c in "0123456789" for c in digits):
            raise ValueError(f"Expected only digits, got {digits!r}")
        return [int(c) for c in digits]

    result = []
    for d in digits:
        if not isinstance(d, int) or not 0 <= d <= 9:
            raise ValueError(f"Expected a digit 0-9, got {d!r}")
        result.append(d)
    return result


def parse_iso_date(value: Union[str, date, datetime]) -> date:
    """
    Parse an ISO-8601 date.

    YAML may already hand back a date object for unquoted values, so
    date and datetime inputs pass through.

    Args:
        value: ISO date string ("1997-10-07"), date or datetime.

    Returns:
        Parsed date.

    Raises:
        ValueError: If the string is not an ISO date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date_parser.isoparse(str(value).strip()).date()


def format_brl_amount(amount: Decimal) -> str:
    """
    Format an amount the way Brazilian amount inputs expect it.

    Example:
        >>> format_brl_amount(Decimal("1234.50"))
        "1234,50"
    """
    return f"{amount:.2f}".replace('.', ',')
