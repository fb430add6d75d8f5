"""
Main Decoder Module.

This module provides the BoletoDecoder class that composes the whole
pipeline into one entry point.

Pipeline:
    normalize -> classify -> extract -> verify -> resolve date/amount

Structural failures (no digits, wrong length) raise; checksum failures
are reported on the result unless strict mode is on.

Author: ML Engineering Team
"""

from datetime import date
from typing import Optional

from config import get_config
from src.extraction import FieldExtractor
from src.input_handler import FormatClassifier, InputNormalizer
from src.postprocessor import AmountResolver, DueDateResolver
from src.utils.exceptions import ChecksumMismatchError, EmptyInputError
from src.utils.logger import get_logger
from .result import DecodeResult

# Initialize module logger
logger = get_logger(__name__)


class BoletoDecoder:
    """
    Decodes boleto barcodes and codelines.

    The decoder holds only collaborators configured at construction and
    keeps no per-call state, so one instance can serve any number of
    concurrent callers.

    Attributes:
        normalizer: InputNormalizer instance
        classifier: FormatClassifier instance
        extractor: FieldExtractor instance
        due_date_resolver: DueDateResolver instance
        amount_resolver: AmountResolver instance
        strict: Raise ChecksumMismatchError instead of flagging

    Example:
        >>> decoder = BoletoDecoder()
        >>> result = decoder.decode("23794.48606 ...")
        >>> print(result.due_date, result.amount)
    """

    def __init__(
        self,
        due_date_resolver: Optional[DueDateResolver] = None,
        amount_resolver: Optional[AmountResolver] = None,
        strict: Optional[bool] = None,
        normalizer: Optional[InputNormalizer] = None,
        classifier: Optional[FormatClassifier] = None,
        extractor: Optional[FieldExtractor] = None
    ) -> None:
        """
        Initialize the decoder with all sub-components.

        Args:
            due_date_resolver: Resolver with the epoch schedule to use.
                               Built from configuration if None.
            amount_resolver: Amount resolver. Built from configuration if None.
            strict: Override for decoder.strict.
            normalizer: Optional InputNormalizer override.
            classifier: Optional FormatClassifier override.
            extractor: Optional FieldExtractor override.
        """
        self.normalizer = normalizer or InputNormalizer()
        self.classifier = classifier or FormatClassifier()
        self.extractor = extractor or FieldExtractor()
        self.due_date_resolver = due_date_resolver or DueDateResolver()
        self.amount_resolver = amount_resolver or AmountResolver()
        self.strict = strict if strict is not None else get_config("decoder.strict", False)

        logger.debug(f"BoletoDecoder initialized (strict={self.strict})")

    def decode(
        self,
        raw: Optional[str],
        strict: Optional[bool] = None,
        reference_date: Optional[date] = None
    ) -> DecodeResult:
        """
        Decode one raw candidate string.

        Args:
            raw: Scanned or typed text, noise allowed.
            strict: Override the decoder's strict setting for this call.
            reference_date: Date used to pick the due-date epoch.

        Returns:
            DecodeResult; checksum_valid is False when any check failed.

        Raises:
            EmptyInputError: If the input contains no digits.
            InvalidLengthError: If the digit count is not 44 or 47.
            ChecksumMismatchError: In strict mode, if any check failed.
        """
        digits = self.normalizer.normalize(raw)
        if not digits:
            raise EmptyInputError()

        fmt = self.classifier.classify(digits)
        fields = self.extractor.extract(digits, fmt)
        failures = self.extractor.verify(fields)

        result = DecodeResult(
            format=fmt,
            checksum_valid=not failures,
            due_date=self.due_date_resolver.resolve(
                fields.due_date_factor_value, reference_date
            ),
            amount=self.amount_resolver.resolve(fields.amount_cents_value),
            raw_fields=fields,
            checksum_failures=failures,
        )

        if not failures:
            logger.debug(f"Decoded {result!r}")
            return result

        logger.warning(
            f"Checksum mismatch for bank {fields.bank_code}: "
            f"{', '.join(block.value for block in failures)}"
        )
        if strict is None:
            strict = self.strict
        if strict:
            raise ChecksumMismatchError(failures, result)
        return result


def decode(raw: Optional[str], strict: Optional[bool] = None) -> DecodeResult:
    """
    Decode with a decoder built from the current configuration.

    Convenience entry point for the scanning collaborator.

    Args:
        raw: Scanned or typed text.
        strict: Override for decoder.strict.

    Returns:
        DecodeResult.
    """
    return BoletoDecoder().decode(raw, strict=strict)
