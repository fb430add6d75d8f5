"""
Amount Resolver Module.

Converts the 10-digit amount field (integral cents) into a Decimal.
An all-zero field means the payer fills in the value, which is a
different thing from a zero amount.

Author: ML Engineering Team
"""

from decimal import Decimal
from typing import Optional


class AmountResolver:
    """
    Resolves cents into a currency amount.

    The field already holds whole cents, so the result always carries
    exactly two fraction digits and is never rounded.

    Example:
        >>> AmountResolver().resolve(123456)
        Decimal('1234.56')
        >>> AmountResolver().resolve(0) is None
        True
    """

    def resolve(self, cents: int) -> Optional[Decimal]:
        """
        Convert cents to a Decimal with two fraction digits.

        Args:
            cents: Value of the amount field.

        Returns:
            Decimal amount, or None for an open amount (0).

        Raises:
            ValueError: If cents is negative.
        """
        if cents < 0:
            raise ValueError(f"Amount cannot be negative: {cents}")
        if cents == 0:
            return None
        return Decimal(cents).scaleb(-2)
