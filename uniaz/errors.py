"""
UniAz Error Hierarchy

Every error raised by the package derives from UniAzError and from the
builtin exception that best describes it, so callers catching ValueError
or IndexError keep working.
"""

from typing import Any, Optional


class UniAzError(Exception):
    """Base class for all UniAz errors."""


class InvalidAlphabet(UniAzError, ValueError):
    """Raised when an alphabet (or a separator) cannot be used by a codec."""


class IndexOutOfRange(UniAzError, IndexError):
    """Raised when a symbol index falls outside [0, N)."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Index {index} is outside the alphabet range [0, {size})")


class UnknownSymbol(UniAzError, ValueError):
    """Raised when a symbol is not a member of the alphabet."""

    def __init__(self, symbol: Any):
        self.symbol = symbol
        super().__init__(f"Symbol {symbol!r} is not in the alphabet")


class DigitOutOfRange(UniAzError, ValueError):
    """
    Raised when a digit outside [0, base) reaches the converter or the
    permutation step. Encrypt and decrypt never produce such digits, so
    seeing this from them points at a bug rather than at bad input.
    """

    def __init__(self, digit: Any, base: int, position: Optional[int] = None):
        self.digit = digit
        self.base = base
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Digit {digit!r}{where} is outside the range [0, {base})")


class InvalidScalarValue(UniAzError, ValueError):
    """Raised when an integer is not a valid, non-surrogate Unicode scalar value."""

    def __init__(self, value: Optional[int] = None, reason: Optional[str] = None):
        self.value = value
        if reason is None:
            reason = f"{value:#x} is not a valid Unicode scalar value"
        super().__init__(reason)


class EmptyEncoding(UniAzError, ValueError):
    """Raised when an encoded token contains no symbols."""


class NonCanonicalEncoding(UniAzError, ValueError):
    """Raised when an encoded token carries a superfluous leading zero digit."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"{text!r} is not a canonical encoding of any character")
