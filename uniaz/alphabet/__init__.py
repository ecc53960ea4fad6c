"""
Alphabet Package

This package defines the ordered symbol set that serves both as the
numeral base and as the output character set of the codec.
"""

from .symbols import Alphabet, DEFAULT_SYMBOLS

__all__ = ['Alphabet', 'DEFAULT_SYMBOLS']
