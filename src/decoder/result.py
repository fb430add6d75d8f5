"""
Decode Result Data Class.

This module defines the structure returned by the decoder and read by
the record-entry collaborator.

Author: ML Engineering Team
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Dict, Optional, Tuple
import json

from src.extraction import BlockId, FieldSet
from src.input_handler import SlipFormat
from src.utils.helpers import format_brl_amount


@dataclass(frozen=True)
class DecodeResult:
    """
    Outcome of decoding one structurally valid boleto.

    A result is produced even when check digits fail, so the caller can
    show the best-effort date and amount with a warning.

    Attributes:
        format: Serialization the input arrived in
        checksum_valid: True when every check digit matched
        due_date: Due date, or None when not specified (factor 0)
        amount: Amount due, or None for an open amount (cents 0)
        raw_fields: Extracted fields
        checksum_failures: Failed check digits, in verification order

    Example:
        >>> result = decoder.decode(code)
        >>> if not result.checksum_valid:
        ...     warn(result.checksum_failures)
        >>> form.fill(**result.to_form_values())
    """
    format: SlipFormat
    checksum_valid: bool
    due_date: Optional[date]
    amount: Optional[Decimal]
    raw_fields: FieldSet
    checksum_failures: Tuple[BlockId, ...] = ()

    @property
    def has_due_date(self) -> bool:
        """False when the slip carries no due date."""
        return self.due_date is not None

    @property
    def is_open_amount(self) -> bool:
        """True when the payer must fill in the amount."""
        return self.amount is None

    @property
    def barcode(self) -> str:
        return self.raw_fields.barcode

    @property
    def codeline(self) -> str:
        return self.raw_fields.to_codeline()

    def to_form_values(self) -> Dict[str, Any]:
        """
        Values for pre-filling a payable record.

        Returns:
            Dictionary with ISO `due_date`, Brazilian-notation `amount`
            (both None when absent) and `checksum_warning`.
        """
        return {
            'due_date': self.due_date.isoformat() if self.due_date else None,
            'amount': format_brl_amount(self.amount) if self.amount is not None else None,
            'checksum_warning': not self.checksum_valid,
        }

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a JSON-serializable dictionary.

        Returns:
            Dictionary representation of the result.
        """
        return {
            'format': self.format.value,
            'checksum_valid': self.checksum_valid,
            'checksum_failures': [block.value for block in self.checksum_failures],
            'due_date': self.due_date.isoformat() if self.due_date else None,
            'amount': str(self.amount) if self.amount is not None else None,
            'barcode': self.barcode,
            'raw_fields': self.raw_fields.to_dict(),
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def __repr__(self) -> str:
        return (
            f"DecodeResult("
            f"format={self.format.value}, "
            f"valid={self.checksum_valid}, "
            f"due={self.due_date}, "
            f"amount={self.amount})"
        )
