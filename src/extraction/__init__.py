"""
Field Extraction Module for the Boleto Decoder.

This module provides functionality for:
    - Slicing barcodes and codelines into a common FieldSet
    - Verifying block and general check digits
    - Converting between barcode and codeline

Author: ML Engineering Team
"""

from .field_set import BlockId, FieldSet
from .extractor import FieldExtractor
from .converter import barcode_to_codeline, codeline_to_barcode, format_codeline

__all__ = [
    'BlockId',
    'FieldSet',
    'FieldExtractor',
    'barcode_to_codeline',
    'codeline_to_barcode',
    'format_codeline'
]
