"""
Base Conversion Package

This package converts non-negative integers to and from digit sequences
in an arbitrary base.
"""

from .radix import to_digits, from_digits, digit_count

__all__ = ['to_digits', 'from_digits', 'digit_count']
