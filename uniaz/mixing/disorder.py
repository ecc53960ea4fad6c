"""
Data-Dependent Digit Mixing

Each round walks the digit sequence once. Digit i is replaced through a
substitution table and an offset that are both derived from every digit
except digit i. Those other digits are unchanged while digit i is
rewritten, so the inverse round can rebuild the same table by walking the
sequence backwards.
"""

import logging
from typing import List, Sequence

from ..errors import DigitOutOfRange

logger = logging.getLogger(__name__)


def _seed(digits: Sequence[int], skip: int, modulus: int, base: int) -> int:
    """
    Horner remainder of all digits except digits[skip], modulo modulus.

    Returns 0 when there is no other digit.
    """
    remainder = 0
    for i, digit in enumerate(digits):
        if i == skip:
            continue
        remainder = (remainder * base + digit) % modulus
    return remainder


def _disorder(digits: Sequence[int], skip: int, base: int) -> List[int]:
    """
    Shuffle [0, base) with swaps seeded by the digits other than digits[skip].
    """
    table = list(range(base))
    for k in range(base - 1, 0, -1):
        j = _seed(digits, skip, k + 1, base)
        table[k], table[j] = table[j], table[k]
    return table


def _offset(digits: Sequence[int], position: int, base: int) -> int:
    return _seed(digits, position, base, base) + position * position + 1


def _validated(digits: Sequence[int], base: int) -> List[int]:
    if base < 2:
        raise ValueError(f"Base must be at least 2, got {base}")
    result = list(digits)
    for position, digit in enumerate(result):
        if not 0 <= digit < base:
            raise DigitOutOfRange(digit, base, position)
    return result


def mix_round(digits: Sequence[int], base: int) -> List[int]:
    """
    Apply one forward mixing round.

    Args:
        digits: Digits in [0, base)
        base: The numeral base (>= 2)

    Returns:
        The mixed digits, same length
    """
    state = _validated(digits, base)
    for i in range(len(state)):
        table = _disorder(state, i, base)
        offset = _offset(state, i, base)
        state[i] = table[(table.index(state[i]) + offset) % base]
    return state


def unmix_round(digits: Sequence[int], base: int) -> List[int]:
    """
    Apply one inverse mixing round, undoing mix_round().
    """
    state = _validated(digits, base)
    for i in reversed(range(len(state))):
        table = _disorder(state, i, base)
        table.reverse()
        offset = _offset(state, i, base)
        state[i] = table[(table.index(state[i]) + offset) % base]
    return state


def mix(digits: Sequence[int], base: int, rounds: int = 1) -> List[int]:
    """
    Apply rounds forward mixing rounds.

    Args:
        digits: Digits in [0, base)
        base: The numeral base (>= 2)
        rounds: Number of rounds (0 returns the digits unchanged)

    Returns:
        The mixed digits
    """
    if rounds < 0:
        raise ValueError(f"Rounds must be non-negative, got {rounds}")

    state = _validated(digits, base)
    for _ in range(rounds):
        state = mix_round(state, base)
    return state


def unmix(digits: Sequence[int], base: int, rounds: int = 1) -> List[int]:
    """
    Apply rounds inverse mixing rounds, undoing mix() with the same rounds.
    """
    if rounds < 0:
        raise ValueError(f"Rounds must be non-negative, got {rounds}")

    state = _validated(digits, base)
    for _ in range(rounds):
        state = unmix_round(state, base)
    return state


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    for base, digits in [(10, [1, 2, 3, 4, 5, 6, 7, 8, 9, 0]), (16, [10, 1, 15, 9, 0]), (2, [1, 1, 0, 1, 0])]:
        mixed = mix(digits, base, rounds=2)
        logger.info("Base %d: %s -> %s", base, digits, mixed)
        assert unmix(mixed, base, rounds=2) == digits

    logger.info("Mixing round checks passed!")
