"""
Custom Exceptions Module.

This module defines all custom exceptions used throughout the boleto
decoder. Each decode failure has its own exception type so callers can
tell an empty scan from a mistyped length or a checksum mismatch.

Exception Hierarchy:
    BoletoDecoderError (base)
    ├── InputError
    │   └── InvalidLengthError
    │       └── EmptyInputError
    ├── ChecksumError
    │   └── ChecksumMismatchError
    └── ConfigurationError
"""


class BoletoDecoderError(Exception):
    """
    Base exception for all boleto decoder errors.

    All custom exceptions in this system inherit from this class,
    allowing for easy catching of all decoder-specific errors.

    Attributes:
        message: Human-readable error message.
        details: Optional dictionary with additional error details.
    """

    def __init__(self, message: str, details: dict = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# INPUT ERRORS
# =============================================================================

class InputError(BoletoDecoderError):
    """Base exception for structurally unusable input."""
    pass


class InvalidLengthError(InputError):
    """
    Raised when the digit count is neither 44 (barcode) nor 47 (codeline).

    Example:
        >>> raise InvalidLengthError(43)
    """

    def __init__(self, length: int, expected: tuple = (44, 47)):
        self.length = length
        message = f"Invalid boleto length: {length} digits"
        details = {"length": length, "expected": list(expected)}
        super().__init__(message, details)


class EmptyInputError(InvalidLengthError):
    """Raised when the candidate text contains no digits at all."""

    def __init__(self):
        super().__init__(0)
        self.message = "No digits found in input"
        self.args = (self.message,)


# =============================================================================
# CHECKSUM ERRORS
# =============================================================================

class ChecksumError(BoletoDecoderError):
    """Base exception for check digit failures."""
    pass


class ChecksumMismatchError(ChecksumError):
    """
    Raised in strict mode when one or more check digits do not match.

    Attributes:
        which: Tuple of failed BlockId values, in verification order.
        result: The best-effort DecodeResult built before raising.
    """

    def __init__(self, which, result=None):
        self.which = tuple(which)
        self.result = result
        names = [block.value for block in self.which]
        message = f"Checksum mismatch in: {', '.join(names)}"
        details = {"which": names}
        super().__init__(message, details)


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================

class ConfigurationError(BoletoDecoderError):
    """Raised when a configuration entry cannot be used."""

    def __init__(self, key: str, reason: str = None):
        message = f"Invalid configuration: {key}"
        details = {"key": key, "reason": reason}
        super().__init__(message, details)


__all__ = [
    'BoletoDecoderError',
    'InputError',
    'InvalidLengthError',
    'EmptyInputError',
    'ChecksumError',
    'ChecksumMismatchError',
    'ConfigurationError',
]
