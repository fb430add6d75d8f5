"""
Field Set Data Classes.

This module defines the fixed-layout structure every boleto is reduced
to, whichever serialization it arrived in.

Classes:
    BlockId: Identifies a checksum-protected region
    FieldSet: Named fields of one boleto

Author: ML Engineering Team
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from src.checksum import mod10


class BlockId(Enum):
    """Region covered by a check digit."""

    BLOCK1 = "block1"
    BLOCK2 = "block2"
    BLOCK3 = "block3"
    GENERAL = "general"


@dataclass(frozen=True)
class FieldSet:
    """
    Named sub-strings of a boleto payment identifier.

    Barcode and codeline encode the same 44-digit value, so both are
    normalized to this shape. Block check digits are only present when
    the input was a codeline.

    Attributes:
        bank_code: Issuing bank code (3 digits)
        currency_code: Currency code, 9 for BRL (1 digit)
        general_check_digit: Modulo-11 digit over the payload (1 digit)
        due_date_factor: Due-date factor (4 digits)
        amount_cents: Amount in cents (10 digits)
        free_field: Bank-specific segment (25 digits)
        block_check_digit1: Codeline field 1 modulo-10 digit
        block_check_digit2: Codeline field 2 modulo-10 digit
        block_check_digit3: Codeline field 3 modulo-10 digit

    Example:
        >>> fields.payload
        "0019100000000100000000000000000000000000000"
        >>> fields.amount_cents_value
        10000
    """
    bank_code: str
    currency_code: str
    general_check_digit: str
    due_date_factor: str
    amount_cents: str
    free_field: str
    block_check_digit1: Optional[str] = None
    block_check_digit2: Optional[str] = None
    block_check_digit3: Optional[str] = None

    @property
    def payload(self) -> str:
        """The 43 digits protected by the general check digit."""
        return (
            self.bank_code
            + self.currency_code
            + self.due_date_factor
            + self.amount_cents
            + self.free_field
        )

    @property
    def barcode(self) -> str:
        """The canonical 44-digit barcode."""
        payload = self.payload
        return payload[:4] + self.general_check_digit + payload[4:]

    @property
    def due_date_factor_value(self) -> int:
        return int(self.due_date_factor)

    @property
    def amount_cents_value(self) -> int:
        return int(self.amount_cents)

    @property
    def block_data(self) -> Tuple[str, str, str]:
        """Data digits of codeline fields 1-3 (9, 10 and 10 digits)."""
        return (
            self.bank_code + self.currency_code + self.free_field[0:5],
            self.free_field[5:15],
            self.free_field[15:25],
        )

    @property
    def block_check_digits(self) -> Tuple[Optional[str], Optional[str], Optional[str]]:
        return (
            self.block_check_digit1,
            self.block_check_digit2,
            self.block_check_digit3,
        )

    def to_codeline(self) -> str:
        """
        Serialize as a 47-digit codeline.

        Block check digits are freshly computed; the general check digit
        is carried over as-is so an invalid barcode stays invalid.
        """
        blocks = ''.join(data + str(mod10(data)) for data in self.block_data)
        return blocks + self.general_check_digit + self.due_date_factor + self.amount_cents

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format."""
        return {
            'bank_code': self.bank_code,
            'currency_code': self.currency_code,
            'general_check_digit': self.general_check_digit,
            'due_date_factor': self.due_date_factor,
            'amount_cents': self.amount_cents,
            'free_field': self.free_field,
            'block_check_digit1': self.block_check_digit1,
            'block_check_digit2': self.block_check_digit2,
            'block_check_digit3': self.block_check_digit3,
        }
