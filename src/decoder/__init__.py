"""
Decoder Module for the Boleto Decoder.

This module provides the orchestrating entry point:
    - BoletoDecoder / decode(): raw text in, DecodeResult out
    - DecodeResult: immutable decode outcome
    - ScanSession: candidate loop for camera scanners

Author: ML Engineering Team
"""

from .result import DecodeResult
from .decoder import BoletoDecoder, decode
from .scan_session import ScanSession

__all__ = ['DecodeResult', 'BoletoDecoder', 'decode', 'ScanSession']
