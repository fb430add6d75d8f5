"""
Boleto Decoder - Source Package.

This package contains all core modules for decoding Brazilian bank-slip
payment identifiers (44-digit barcode or 47-digit codeline) into a due
date and an amount, with check digit verification. Each module has a
single responsibility.

Modules:
    - input_handler: digit normalization and format classification
    - checksum: modulo-10 and modulo-11 check digits
    - extraction: fixed-layout field extraction and format conversion
    - postprocessor: due-date and amount resolution
    - decoder: orchestration, results and scan sessions
    - utils: logging, exceptions, helpers

Architecture:
    Normalize → Classify → Extract/Verify → Resolve → DecodeResult
"""

__version__ = "1.0.0"
__author__ = "ML Engineering Team"

__all__ = [
    'input_handler',
    'checksum',
    'extraction',
    'postprocessor',
    'decoder',
    'utils'
]
