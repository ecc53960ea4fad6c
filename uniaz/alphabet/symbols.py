"""
Alphabet Implementation

This module implements the Alphabet, an immutable ordered set of distinct
single-character symbols with a bidirectional symbol/index mapping.
"""

from typing import Dict, Iterator, Sequence, Tuple, Union

from ..errors import IndexOutOfRange, InvalidAlphabet, UnknownSymbol

# Default symbol set: lowercase Latin letters, base 26
DEFAULT_SYMBOLS = 'abcdefghijklmnopqrstuvwxyz'


class Alphabet:
    """
    Ordered, duplicate-free set of symbols. The position of a symbol is its
    digit value, and the number of symbols is the numeral base.
    """

    __slots__ = ('_symbols', '_indices')

    def __init__(self, symbols: Union[str, Sequence[str]] = DEFAULT_SYMBOLS):
        """
        Build the alphabet from an ordered sequence of symbols.

        Args:
            symbols: A string, or a sequence of one-character strings

        Raises:
            InvalidAlphabet: If there are fewer than 2 symbols, a duplicate,
                or a symbol that is not a single character
        """
        try:
            ordered = tuple(symbols)
        except TypeError:
            raise InvalidAlphabet(f"Alphabet must be a sequence of symbols, got {type(symbols).__name__}")

        for symbol in ordered:
            if not isinstance(symbol, str) or len(symbol) != 1:
                raise InvalidAlphabet(f"Alphabet symbols must be single characters, got {symbol!r}")

        if len(ordered) < 2:
            raise InvalidAlphabet(f"Alphabet needs at least 2 symbols, got {len(ordered)}")

        indices: Dict[str, int] = {}
        for i, symbol in enumerate(ordered):
            if symbol in indices:
                raise InvalidAlphabet(f"Duplicate symbol {symbol!r} in alphabet")
            indices[symbol] = i

        object.__setattr__(self, '_symbols', ordered)
        object.__setattr__(self, '_indices', indices)

    def __setattr__(self, name, value):
        raise AttributeError("Alphabet is immutable")

    def __reduce__(self):
        # Rebuild through __init__ so copy and pickle bypass __setattr__
        return (Alphabet, (self._symbols,))

    @property
    def symbols(self) -> Tuple[str, ...]:
        return self._symbols

    def size(self) -> int:
        """Return N, the number of symbols and the numeral base."""
        return len(self._symbols)

    def symbol_at(self, index: int) -> str:
        """
        Return the symbol whose digit value is index.

        Raises:
            IndexOutOfRange: If index is not in [0, N)
        """
        if not 0 <= index < len(self._symbols):
            raise IndexOutOfRange(index, len(self._symbols))
        return self._symbols[index]

    def index_of(self, symbol: str) -> int:
        """
        Return the digit value of symbol.

        Raises:
            UnknownSymbol: If symbol is not in the alphabet
        """
        try:
            return self._indices[symbol]
        except (KeyError, TypeError):
            raise UnknownSymbol(symbol) from None

    def __len__(self) -> int:
        return len(self._symbols)

    def __contains__(self, symbol) -> bool:
        try:
            return symbol in self._indices
        except TypeError:
            return False

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __repr__(self) -> str:
        return f"Alphabet({''.join(self._symbols)!r})"


if __name__ == "__main__":
    alphabet = Alphabet()
    print(f"Default alphabet: {alphabet} (base {alphabet.size()})")
    print(f"index_of('q') = {alphabet.index_of('q')}")
    print(f"symbol_at(16) = {alphabet.symbol_at(16)}")

    try:
        Alphabet("abca")
        print("ERROR: duplicate symbol not detected!")
    except InvalidAlphabet as e:
        print(f"Correctly rejected alphabet: {e}")
