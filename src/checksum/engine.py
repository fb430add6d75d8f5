"""
Checksum Engine Module.

This module implements the two check digit algorithms carried by
Brazilian bank slips:

    - Block modulo-10: protects each of the three codeline data blocks.
    - Payload modulo-11: the general check digit protecting the whole
      43-digit barcode payload (barcode position 5, codeline field 4).

Both are pure functions of their input.

Author: ML Engineering Team
"""

from typing import Sequence, Union

from src.utils.helpers import to_digit_list

Digits = Union[str, Sequence[int]]


def mod10(digits: Digits) -> int:
    """
    Compute the block modulo-10 check digit.

    Weights alternate 2, 1, 2, 1, ... starting at 2 on the leftmost
    digit. Products of 10 or more are reduced to the sum of their two
    digits (i.e. minus 9).

    Bank-printed codelines weight from the rightmost digit instead. The
    two orders agree on the odd-length first block but can disagree on
    the 10-digit second and third blocks: "6000021255" gives 5 here and
    9 on a printed Bradesco slip.

    Args:
        digits: Block data digits, as a string or sequence of ints.

    Returns:
        Check digit 0-9.

    Raises:
        ValueError: If the input contains a non-digit.

    Example:
        >>> mod10("001900000")
        9
    """
    total = 0
    for index, digit in enumerate(to_digit_list(digits)):
        product = digit * (2 if index % 2 == 0 else 1)
        if product >= 10:
            product -= 9
        total += product

    remainder = total % 10
    return 0 if remainder == 0 else 10 - remainder


def mod11(payload: Digits) -> int:
    """
    Compute the general modulo-11 check digit.

    Scanning right to left, weights cycle 2..9 and restart at 2.
    Products are summed without reduction; the digit is 11 - (sum % 11),
    with results 0, 10 and 11 normalized to 1.

    Args:
        payload: The 43-digit payload (barcode minus its check digit).

    Returns:
        Check digit 1-9.

    Raises:
        ValueError: If the input contains a non-digit.
    """
    total = 0
    for position, digit in enumerate(reversed(to_digit_list(payload))):
        total += digit * (2 + position % 8)

    digit = 11 - (total % 11)
    if digit in (0, 10, 11):
        return 1
    return digit


class ChecksumEngine:
    """
    Thin object wrapper around mod10/mod11 with comparison helpers.

    Kept as a class so the extractor can take it as a collaborator.
    """

    def verify_block(self, data: Digits, check_digit: str) -> bool:
        """Return True when `check_digit` equals mod10 of `data`."""
        return str(mod10(data)) == check_digit

    def verify_general(self, payload: Digits, check_digit: str) -> bool:
        """Return True when `check_digit` equals mod11 of `payload`."""
        return str(mod11(payload)) == check_digit
