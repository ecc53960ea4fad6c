"""
Radix Conversion

This module implements the lossless mapping between a non-negative integer
and its minimal digit sequence in base N, most significant digit first.
The representation is unique, so a decoder recovers the digit count from
the length of the sequence alone.
"""

from typing import List, Sequence

from ..errors import DigitOutOfRange


def _check_base(base: int) -> None:
    if base < 2:
        raise ValueError(f"Base must be at least 2, got {base}")


def to_digits(value: int, base: int) -> List[int]:
    """
    Decompose value into base-N digits.

    Args:
        value: Non-negative integer to convert
        base: The numeral base (>= 2)

    Returns:
        Digits in [0, base), most significant first, without leading zeros.
        Zero is represented by the single digit [0].
    """
    _check_base(base)
    if value < 0:
        raise ValueError(f"Value must be non-negative, got {value}")

    if value == 0:
        return [0]

    digits = []
    while value:
        value, remainder = divmod(value, base)
        digits.append(remainder)
    digits.reverse()
    return digits


def from_digits(digits: Sequence[int], base: int) -> int:
    """
    Evaluate a digit sequence as a base-N number.

    Args:
        digits: Digits in [0, base), most significant first
        base: The numeral base (>= 2)

    Returns:
        The integer value

    Raises:
        DigitOutOfRange: If any digit is outside [0, base)
    """
    _check_base(base)
    if len(digits) == 0:
        raise ValueError("Digit sequence must not be empty")

    value = 0
    for position, digit in enumerate(digits):
        if not 0 <= digit < base:
            raise DigitOutOfRange(digit, base, position)
        value = value * base + digit
    return value


def digit_count(value: int, base: int) -> int:
    """Return the number of digits to_digits(value, base) produces."""
    _check_base(base)
    if value < 0:
        raise ValueError(f"Value must be non-negative, got {value}")

    count = 1
    while value >= base:
        value //= base
        count += 1
    return count


if __name__ == "__main__":
    for value, base in [(0, 26), (65, 26), (0x4F60, 26), (0x1F600, 26), (0x20AC, 2)]:
        digits = to_digits(value, base)
        print(f"{value:#x} in base {base}: {digits}")
        assert from_digits(digits, base) == value
        assert digit_count(value, base) == len(digits)

    print("Radix conversion checks passed!")
