"""
Scan Session Module.

A camera scanner produces candidate strings at frame rate. ScanSession
feeds them to the decoder until one decodes with valid check digits,
then stops invoking the decoder and keeps handing back that result.

Author: ML Engineering Team
"""

from typing import Optional

from src.utils.exceptions import BoletoDecoderError
from src.utils.logger import get_logger
from .decoder import BoletoDecoder
from .result import DecodeResult

# Initialize module logger
logger = get_logger(__name__)


class ScanSession:
    """
    Candidate loop for one scanning session.

    Attributes:
        decoder: BoletoDecoder used for each candidate
        result: First result with valid check digits, once found
        best_effort: Latest structurally valid result with failed checks
        last_error: Error raised by the latest rejected candidate
        attempts: Number of candidates passed to the decoder

    Example:
        >>> session = ScanSession()
        >>> for text in frames:
        ...     if session.feed(text):
        ...         break
        >>> prefill(session.result)
    """

    def __init__(self, decoder: Optional[BoletoDecoder] = None) -> None:
        self.decoder = decoder or BoletoDecoder(strict=False)
        self.reset()

    def reset(self) -> None:
        """Start a new session."""
        self.result: Optional[DecodeResult] = None
        self.best_effort: Optional[DecodeResult] = None
        self.last_error: Optional[BoletoDecoderError] = None
        self.attempts = 0

    @property
    def done(self) -> bool:
        return self.result is not None

    def feed(self, raw: Optional[str]) -> Optional[DecodeResult]:
        """
        Offer one candidate string.

        Args:
            raw: Text recognized in a frame.

        Returns:
            The accepted result once a candidate decodes with valid check
            digits, otherwise None.
        """
        if self.done:
            return self.result

        self.attempts += 1
        try:
            candidate = self.decoder.decode(raw, strict=False)
        except BoletoDecoderError as e:
            self.last_error = e
            logger.debug(f"Candidate {self.attempts} rejected: {e}")
            return None

        if not candidate.checksum_valid:
            self.best_effort = candidate
            return None

        self.result = candidate
        logger.info(f"Boleto accepted after {self.attempts} candidate(s)")
        return candidate
