"""
Field Extractor Module.

This module slices a classified digit string into a FieldSet using the
fixed positions of each format, and verifies every check digit.

Barcode (44):
    [0:3) bank | [3:4) currency | [4:5) general DV | [5:9) factor |
    [9:19) amount | [19:44) free field

Codeline (47):
    [0:10)  field 1 = bank + currency + free[0:5] + DV1
    [10:21) field 2 = free[5:15] + DV2
    [21:32) field 3 = free[15:25] + DV3
    [32:33) field 4 = general DV
    [33:47) field 5 = factor + amount

Author: ML Engineering Team
"""

from typing import List, Optional, Tuple

from src.checksum import ChecksumEngine
from src.input_handler.classifier import SlipFormat
from src.utils.exceptions import InvalidLengthError
from src.utils.logger import get_logger
from .field_set import BlockId, FieldSet

# Initialize module logger
logger = get_logger(__name__)


class FieldExtractor:
    """
    Position-exact field extraction and check digit verification.

    Attributes:
        checksum_engine: ChecksumEngine used for verification

    Example:
        >>> extractor = FieldExtractor()
        >>> fields = extractor.extract(digits, SlipFormat.CODELINE_47)
        >>> extractor.verify(fields)
        ()
    """

    BLOCK_IDS = (BlockId.BLOCK1, BlockId.BLOCK2, BlockId.BLOCK3)

    def __init__(self, checksum_engine: Optional[ChecksumEngine] = None) -> None:
        self.checksum_engine = checksum_engine or ChecksumEngine()

    def extract(self, digits: str, fmt: SlipFormat) -> FieldSet:
        """
        Slice `digits` into named fields.

        Args:
            digits: Normalized digits of the classified length.
            fmt: Format chosen by FormatClassifier.

        Returns:
            FieldSet with the same shape for both formats.

        Raises:
            InvalidLengthError: If `digits` does not match the format length.
        """
        if len(digits) != fmt.length:
            raise InvalidLengthError(len(digits), (fmt.length,))

        if fmt is SlipFormat.BARCODE_44:
            return self._extract_barcode(digits)
        return self._extract_codeline(digits)

    def _extract_barcode(self, digits: str) -> FieldSet:
        return FieldSet(
            bank_code=digits[0:3],
            currency_code=digits[3:4],
            general_check_digit=digits[4:5],
            due_date_factor=digits[5:9],
            amount_cents=digits[9:19],
            free_field=digits[19:44],
        )

    def _extract_codeline(self, digits: str) -> FieldSet:
        field1 = digits[0:10]
        field2 = digits[10:21]
        field3 = digits[21:32]
        field5 = digits[33:47]

        return FieldSet(
            bank_code=field1[0:3],
            currency_code=field1[3:4],
            general_check_digit=digits[32:33],
            due_date_factor=field5[0:4],
            amount_cents=field5[4:14],
            free_field=field1[4:9] + field2[0:10] + field3[0:10],
            block_check_digit1=field1[9],
            block_check_digit2=field2[10],
            block_check_digit3=field3[10],
        )

    def verify(self, fields: FieldSet) -> Tuple[BlockId, ...]:
        """
        Run every applicable check digit.

        Block digits are checked only when present (codeline input); the
        general digit is always checked. All checks run even after a
        failure.

        Args:
            fields: FieldSet from extract().

        Returns:
            Failed BlockIds in verification order; empty when all pass.
        """
        failures: List[BlockId] = []

        for block_id, data, check_digit in zip(
            self.BLOCK_IDS, fields.block_data, fields.block_check_digits
        ):
            if check_digit is None:
                continue
            if not self.checksum_engine.verify_block(data, check_digit):
                logger.debug(f"{block_id.value} check digit mismatch (got {check_digit})")
                failures.append(block_id)

        if not self.checksum_engine.verify_general(fields.payload, fields.general_check_digit):
            logger.debug(f"General check digit mismatch (got {fields.general_check_digit})")
            failures.append(BlockId.GENERAL)

        return tuple(failures)
