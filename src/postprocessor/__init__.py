"""
Post-Processing Module for the Boleto Decoder.

This module provides functionality for:
    - Due-date factor resolution against a configurable epoch schedule
    - Amount resolution from cents, with open-amount detection

Author: ML Engineering Team
"""

from .due_date import DueDateResolver, FactorEpoch, DOCUMENTED_EPOCH, LEGACY_EPOCH
from .amount import AmountResolver

__all__ = [
    'DueDateResolver',
    'FactorEpoch',
    'DOCUMENTED_EPOCH',
    'LEGACY_EPOCH',
    'AmountResolver'
]
