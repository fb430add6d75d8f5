"""
Format Classifier Module.

Decides from the digit count alone whether a normalized candidate is a
barcode (44 digits) or a codeline (47 digits).

Author: ML Engineering Team
"""

from enum import Enum

from src.utils.logger import get_logger
from src.utils.exceptions import InvalidLengthError

# Initialize module logger
logger = get_logger(__name__)


class SlipFormat(Enum):
    """Serialization of a boleto payment identifier."""

    BARCODE_44 = "barcode44"
    CODELINE_47 = "codeline47"

    @property
    def length(self) -> int:
        """Digit count of this format."""
        return 44 if self is SlipFormat.BARCODE_44 else 47


class FormatClassifier:
    """
    Classifies normalized digits by length.

    Lengths other than 44 and 47 are rejected, never truncated or
    padded.

    Example:
        >>> FormatClassifier().classify("0" * 47)
        <SlipFormat.CODELINE_47: 'codeline47'>
    """

    FORMATS_BY_LENGTH = {fmt.length: fmt for fmt in SlipFormat}

    def classify(self, digits: str) -> SlipFormat:
        """
        Pick the format for a digit string.

        Args:
            digits: Output of InputNormalizer.

        Returns:
            The matching SlipFormat.

        Raises:
            InvalidLengthError: If the length is not 44 or 47 (including 0).
        """
        fmt = self.FORMATS_BY_LENGTH.get(len(digits))
        if fmt is None:
            raise InvalidLengthError(len(digits), tuple(sorted(self.FORMATS_BY_LENGTH)))

        logger.debug(f"Classified {len(digits)} digits as {fmt.value}")
        return fmt
