"""
Positional Digit Permutation

This module implements an affine bijection over [0, N) keyed by the digit
position (0 = most significant):

    shift(p)         = p*p + 1
    multiplier(p, N) = smallest m >= 2p + 1 with gcd(m, N) == 1
    permute(d, p, N) = (multiplier(p, N) * d + shift(p)) mod N

The multiplier is a unit modulo N, so the map is invertible:

    unpermute(e, p, N) = multiplier(p, N)^-1 * (e - shift(p)) mod N

Neighbouring values are spread apart differently at every position, so
characters that differ only in their last digit do not produce encodings
that differ by one symbol step. This gives no cryptographic security.
"""

from math import gcd
from typing import List, Sequence, Tuple

import numpy as np

from ..errors import DigitOutOfRange


def _check_args(position: int, base: int) -> None:
    if base < 2:
        raise ValueError(f"Base must be at least 2, got {base}")
    if position < 0:
        raise ValueError(f"Position must be non-negative, got {position}")


def _multiplier(position: int, base: int) -> int:
    m = 2 * position + 1
    while gcd(m, base) != 1:
        m += 1
    return m % base


def _shift(position: int) -> int:
    return position * position + 1


def _coefficients(position: int, base: int) -> Tuple[int, int, int]:
    """
    Return (multiplier, inverse multiplier, shift) for a position.
    """
    _check_args(position, base)
    m = _multiplier(position, base)
    return m, pow(m, -1, base), _shift(position)


def permute(digit: int, position: int, base: int) -> int:
    """
    Permute a single digit according to its position.

    Args:
        digit: Digit value in [0, base)
        position: Index of the digit in its sequence (0 = most significant)
        base: The numeral base (>= 2)

    Returns:
        The permuted digit in [0, base)

    Raises:
        DigitOutOfRange: If digit is outside [0, base)
    """
    m, _, s = _coefficients(position, base)
    if not 0 <= digit < base:
        raise DigitOutOfRange(digit, base, position)

    # Multiply by a unit mod base, then shift
    return (m * digit + s) % base


def unpermute(digit: int, position: int, base: int) -> int:
    """
    Invert permute() for the same position and base.

    Args:
        digit: Permuted digit value in [0, base)
        position: Index of the digit in its sequence (0 = most significant)
        base: The numeral base (>= 2)

    Returns:
        The original digit in [0, base)
    """
    _, inv_m, s = _coefficients(position, base)
    if not 0 <= digit < base:
        raise DigitOutOfRange(digit, base, position)
    return (inv_m * ((digit - s) % base)) % base


def _as_digit_array(digits: Sequence[int], base: int) -> np.ndarray:
    if base < 2:
        raise ValueError(f"Base must be at least 2, got {base}")
    arr = np.asarray(digits, dtype=np.int64)
    bad = np.flatnonzero((arr < 0) | (arr >= base))
    if bad.size:
        raise DigitOutOfRange(int(arr[bad[0]]), base, int(bad[0]))
    return arr


def permute_digits(digits: Sequence[int], base: int) -> List[int]:
    """
    Permute every digit of a sequence, using its index as the position.

    Args:
        digits: Digits in [0, base), most significant first
        base: The numeral base (>= 2)

    Returns:
        The permuted digits, same length and order
    """
    arr = _as_digit_array(digits, base)

    # Per-position multipliers and shifts
    positions = np.arange(arr.size, dtype=np.int64)
    multipliers = np.array([_multiplier(int(p), base) for p in positions], dtype=np.int64)
    shifts = positions * positions + 1

    # Affine map applied to every digit at once
    return ((multipliers * arr + shifts) % base).tolist()


def unpermute_digits(digits: Sequence[int], base: int) -> List[int]:
    """
    Invert permute_digits() for a sequence of the same length.
    """
    arr = _as_digit_array(digits, base)

    # Modular inverses of the per-position multipliers
    positions = np.arange(arr.size, dtype=np.int64)
    inverses = np.array(
        [pow(_multiplier(int(p), base), -1, base) for p in positions], dtype=np.int64
    )
    shifts = positions * positions + 1
    return ((inverses * ((arr - shifts) % base)) % base).tolist()


def permutation_table(position: int, base: int) -> np.ndarray:
    """
    Build the lookup table of permute() for one position.

    Args:
        position: Digit position (0 = most significant)
        base: The numeral base (>= 2)

    Returns:
        Array t of length base with t[d] == permute(d, position, base)
    """
    m, _, s = _coefficients(position, base)
    return (m * np.arange(base, dtype=np.int64) + s) % base


def inverse_table(position: int, base: int) -> np.ndarray:
    """
    Build the lookup table of unpermute() for one position.

    Returns:
        Array t of length base with t[e] == unpermute(e, position, base)
    """
    table = permutation_table(position, base)

    # Scatter each index to the slot its image points at
    inv = np.empty_like(table)
    inv[table] = np.arange(base, dtype=np.int64)
    return inv


if __name__ == "__main__":
    base = 26
    for position in range(5):
        table = permutation_table(position, base)
        print(f"Position {position}: {table.tolist()}")
        assert np.array_equal(np.sort(table), np.arange(base))
        assert np.array_equal(inverse_table(position, base)[table], np.arange(base))

    digits = [1, 2, 25, 0]
    permuted = permute_digits(digits, base)
    print(f"{digits} -> {permuted}")
    assert unpermute_digits(permuted, base) == digits

    print("Permutation checks passed!")
