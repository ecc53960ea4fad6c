"""
Permutation Package

This package implements the position-keyed digit permutation that turns a
plain base-N rendering into the UniAz cipher text.
"""

from .positional import (
    permute, unpermute, permute_digits, unpermute_digits,
    permutation_table, inverse_table
)

__all__ = [
    'permute', 'unpermute', 'permute_digits', 'unpermute_digits',
    'permutation_table', 'inverse_table'
]
