"""
Checksum Module for the Boleto Decoder.

Provides the block modulo-10 and payload modulo-11 check digit
algorithms.

Author: ML Engineering Team
"""

from .engine import ChecksumEngine, mod10, mod11

__all__ = ['ChecksumEngine', 'mod10', 'mod11']
