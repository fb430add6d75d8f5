"""
Input Handler Module for the Boleto Decoder.

This module provides functionality for:
    - Stripping scanner/paste noise down to digits
    - Classifying the digit string as barcode or codeline

Supported formats:
    - Barcode: 44 digits
    - Codeline (linha digitavel): 47 digits

Author: ML Engineering Team
"""

from .normalizer import InputNormalizer
from .classifier import FormatClassifier, SlipFormat

__all__ = ['InputNormalizer', 'FormatClassifier', 'SlipFormat']
