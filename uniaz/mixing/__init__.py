"""
Digit Mixing Package

This package implements optional mixing rounds that shuffle each digit
through a table derived from the other digits of the same sequence.
"""

from .disorder import mix, unmix, mix_round, unmix_round

__all__ = ['mix', 'unmix', 'mix_round', 'unmix_round']
