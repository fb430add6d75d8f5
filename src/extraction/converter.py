"""
Format Converter Module.

Barcode and codeline are two serializations of one 44-digit value.
This module converts between them and renders the printed codeline
grouping.

Author: ML Engineering Team
"""

from src.input_handler import InputNormalizer, SlipFormat
from src.utils.exceptions import InvalidLengthError
from .extractor import FieldExtractor

_normalizer = InputNormalizer()
_extractor = FieldExtractor()


def _digits_for(text: str, fmt: SlipFormat) -> str:
    digits = _normalizer.normalize(text)
    if len(digits) != fmt.length:
        raise InvalidLengthError(len(digits), (fmt.length,))
    return digits


def barcode_to_codeline(barcode: str) -> str:
    """
    Convert a 44-digit barcode to its 47-digit codeline.

    Block check digits are computed; the general digit is copied.

    Raises:
        InvalidLengthError: If `barcode` does not hold 44 digits.
    """
    digits = _digits_for(barcode, SlipFormat.BARCODE_44)
    return _extractor.extract(digits, SlipFormat.BARCODE_44).to_codeline()


def codeline_to_barcode(codeline: str) -> str:
    """
    Convert a 47-digit codeline to its 44-digit barcode.

    Digits are moved positionally; block check digits are dropped
    without verification.

    Raises:
        InvalidLengthError: If `codeline` does not hold 47 digits.
    """
    digits = _digits_for(codeline, SlipFormat.CODELINE_47)
    return _extractor.extract(digits, SlipFormat.CODELINE_47).barcode


def format_codeline(codeline: str) -> str:
    """
    Render a codeline with its printed grouping.

    Example:
        >>> format_codeline("00190000090000000000000000000000110000000010000")
        "00190.00009 00000.000000 00000.000000 1 10000000010000"
    """
    digits = _digits_for(codeline, SlipFormat.CODELINE_47)
    return ' '.join([
        f"{digits[0:5]}.{digits[5:10]}",
        f"{digits[10:15]}.{digits[15:21]}",
        f"{digits[21:26]}.{digits[26:32]}",
        digits[32],
        digits[33:47],
    ])
