"""
Utility Module for the Boleto Decoder.

This module provides common utilities used across all other modules:
    - Logging configuration
    - Custom exceptions
    - Common helpers
"""

from .logger import setup_logger, get_logger
from .helpers import to_digit_list, parse_iso_date, format_brl_amount

__all__ = [
    'setup_logger',
    'get_logger',
    'to_digit_list',
    'parse_iso_date',
    'format_brl_amount'
]
