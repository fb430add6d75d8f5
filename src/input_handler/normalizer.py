"""
Input Normalizer Module.

Scanners and paste fields produce noisy text: labels, spaces, dots
between codeline groups, line breaks. This module reduces any candidate
string to the ordered run of its ASCII digits.

Author: ML Engineering Team
"""

import re
from typing import Optional

from src.utils.logger import get_logger

# Initialize module logger
logger = get_logger(__name__)


class InputNormalizer:
    """
    Strips every non-digit character from a raw candidate string.

    Only ASCII 0-9 survive; other Unicode digits (e.g. Arabic-Indic)
    are dropped along with letters and punctuation.

    Example:
        >>> InputNormalizer().normalize("00190.00009 00000.000000")
        "00190000090000000000"
    """

    NON_DIGITS = re.compile(r'[^0-9]')

    def normalize(self, raw: Optional[str]) -> str:
        """
        Keep the ASCII digits of `raw`, in order.

        Args:
            raw: Scanned or pasted text. None is treated as empty.

        Returns:
            Digit-only string, possibly empty. Never raises.
        """
        if not raw:
            return ""

        digits = self.NON_DIGITS.sub('', raw)
        if len(digits) != len(raw):
            logger.debug(f"Normalized input: dropped {len(raw) - len(digits)} non-digit chars")
        return digits
