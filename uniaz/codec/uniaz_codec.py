"""
UniAz Codec

This module ties the alphabet, the radix converter, the positional
permutation and the optional mixing rounds together into encrypt() and
decrypt() for single characters, plus separator-joined helpers for whole
strings.
"""

import logging
from typing import List, Optional, Sequence, Union

from ..alphabet import Alphabet, DEFAULT_SYMBOLS
from ..base_convert import to_digits, from_digits, digit_count
from ..errors import (
    EmptyEncoding, InvalidAlphabet, InvalidScalarValue, NonCanonicalEncoding, UniAzError
)
from ..mixing import mix, unmix
from ..permutation import permute_digits, unpermute_digits

logger = logging.getLogger(__name__)

# Default codec parameters
CODEC_DEFAULT_PARAMS = {
    'symbols': DEFAULT_SYMBOLS,  # Output alphabet, base 26
    'rounds': 0,                 # Mixing rounds on top of the permutation
    'separator': ' '             # Preferred join string for encrypt_str()
}

MAX_SCALAR_VALUE = 0x10FFFF
SURROGATE_MIN = 0xD800
SURROGATE_MAX = 0xDFFF

AlphabetSpec = Union[Alphabet, str, Sequence[str], None]


# Separators tried in order when none is given; the first one outside the alphabet wins
SEPARATOR_FALLBACKS = (CODEC_DEFAULT_PARAMS['separator'], '|', ',', ';', '-', '.', '\t', '\n')


def _is_scalar_value(value: int) -> bool:
    return 0 <= value <= MAX_SCALAR_VALUE and not SURROGATE_MIN <= value <= SURROGATE_MAX


def _pick_separator(alphabet: Alphabet) -> Optional[str]:
    """
    Choose a default separator for an alphabet.

    Tries SEPARATOR_FALLBACKS first, then every scalar value from U+0021
    upwards. Returns None only if the alphabet covers all of them.
    """
    for candidate in SEPARATOR_FALLBACKS:
        if candidate not in alphabet:
            return candidate
    for value in range(0x21, MAX_SCALAR_VALUE + 1):
        if _is_scalar_value(value) and chr(value) not in alphabet:
            return chr(value)
    return None


class UniAz:
    """
    Reversible codec between Unicode characters and strings over a fixed
    alphabet. Instances hold no mutable state and can be shared across
    threads.
    """

    def __init__(self,
                 alphabet: AlphabetSpec = None,
                 rounds: int = CODEC_DEFAULT_PARAMS['rounds'],
                 separator: Optional[str] = None):
        """
        Initialize the codec.

        Args:
            alphabet: An Alphabet, a string or sequence of symbols, or None
                for the default lowercase Latin alphabet
            rounds: Number of mixing rounds applied after the permutation
            separator: String placed between encoded characters by
                encrypt_str(); must not share characters with the alphabet.
                When omitted, the first entry of SEPARATOR_FALLBACKS that is
                not an alphabet symbol is used.

        Raises:
            InvalidAlphabet: If the alphabet or an explicit separator is unusable
            ValueError: If rounds is negative
        """
        if alphabet is None:
            alphabet = CODEC_DEFAULT_PARAMS['symbols']
        if not isinstance(alphabet, Alphabet):
            alphabet = Alphabet(alphabet)

        if rounds < 0:
            raise ValueError(f"Rounds must be non-negative, got {rounds}")

        if separator is None:
            separator = _pick_separator(alphabet)
        else:
            if not isinstance(separator, str) or not separator:
                raise InvalidAlphabet("Separator must be a non-empty string")
            clashes = sorted(set(separator) & set(alphabet))
            if clashes:
                raise InvalidAlphabet(f"Separator {separator!r} uses alphabet symbols {clashes}")

        self._alphabet = alphabet
        self._base = alphabet.size()
        self._rounds = rounds
        self._separator = separator

        # Longest token encrypt() can produce; anything longer is rejected unread
        self._max_length = digit_count(MAX_SCALAR_VALUE, self._base)

        logger.debug("UniAz codec ready: base=%d rounds=%d separator=%r max_length=%d",
                     self._base, self._rounds, self._separator, self._max_length)

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def rounds(self) -> int:
        return self._rounds

    @property
    def separator(self) -> Optional[str]:
        return self._separator

    def _require_separator(self) -> str:
        if self._separator is None:
            raise InvalidAlphabet("Alphabet leaves no character free to use as a separator")
        return self._separator

    def _encode_digits(self, digits: List[int]) -> List[int]:
        # Position-keyed permutation, then optional mixing rounds
        digits = permute_digits(digits, self._base)
        return mix(digits, self._base, self._rounds)

    def _decode_digits(self, digits: List[int]) -> List[int]:
        # Undo the steps of _encode_digits in reverse order
        digits = unmix(digits, self._base, self._rounds)
        return unpermute_digits(digits, self._base)

    def encrypt(self, character: str) -> str:
        """
        Encrypt a single Unicode character.

        Args:
            character: A string holding exactly one character

        Returns:
            The encoded string, made only of alphabet symbols

        Raises:
            ValueError: If character is not a one-character string
            InvalidScalarValue: If character is a lone surrogate
        """
        if not isinstance(character, str) or len(character) != 1:
            raise ValueError(f"Expected a single character, got {character!r}")

        # Scalar value of the character
        value = ord(character)
        if not _is_scalar_value(value):
            raise InvalidScalarValue(value)

        # Base-N digits, scrambled, then mapped to symbols
        digits = self._encode_digits(to_digits(value, self._base))
        return ''.join(self._alphabet.symbol_at(d) for d in digits)

    def decrypt(self, text: str) -> str:
        """
        Decrypt a string produced by encrypt() back to its character.

        Args:
            text: The encoded string

        Returns:
            The original character

        Raises:
            EmptyEncoding: If text is empty
            UnknownSymbol: If text contains a symbol outside the alphabet
            NonCanonicalEncoding: If text has a superfluous leading zero digit
            InvalidScalarValue: If the decoded value is not a Unicode scalar value
        """
        if not text:
            raise EmptyEncoding("Cannot decrypt an empty string")

        try:
            # Reject overlong tokens before any decoding work
            if len(text) > self._max_length:
                raise InvalidScalarValue(
                    reason=f"Token of {len(text)} symbols exceeds the {self._max_length}-symbol limit"
                )

            # Symbols to digit values, then undo mixing and permutation
            digits = self._decode_digits([self._alphabet.index_of(s) for s in text])
            if len(digits) > 1 and digits[0] == 0:
                raise NonCanonicalEncoding(text)

            # Evaluate as a base-N number and check it is a scalar value
            value = from_digits(digits, self._base)
            if not _is_scalar_value(value):
                raise InvalidScalarValue(value)
        except UniAzError as e:
            logger.debug("Failed to decrypt %r: %s", text, e)
            raise

        return chr(value)

    def encrypt_str(self, text: str) -> str:
        """
        Encrypt every character of text and join the results with the separator.

        Args:
            text: Any string (may be empty)

        Returns:
            The encoded tokens joined by the separator
        """
        return self._require_separator().join(self.encrypt(c) for c in text)

    def decrypt_str(self, text: str) -> str:
        """
        Decrypt a string produced by encrypt_str().

        Args:
            text: Separator-joined encoded tokens

        Returns:
            The original string

        Raises:
            EmptyEncoding: If a token is empty (doubled, leading or trailing separator)
        """
        separator = self._require_separator()
        if not text:
            return ''
        return ''.join(self.decrypt(token) for token in text.split(separator))

    def __repr__(self) -> str:
        return f"UniAz(alphabet={self._alphabet!r}, rounds={self._rounds}, separator={self._separator!r})"


Codec = UniAz


def encrypt(character: str, alphabet: AlphabetSpec = None) -> str:
    """
    Convenience function to encrypt a single character.

    Args:
        character: The character to encrypt
        alphabet: Optional alphabet (default lowercase Latin letters)

    Returns:
        The encoded string
    """
    return UniAz(alphabet).encrypt(character)


def decrypt(text: str, alphabet: AlphabetSpec = None) -> str:
    """
    Convenience function to decrypt a single character.

    Args:
        text: The encoded string
        alphabet: Optional alphabet (default lowercase Latin letters)

    Returns:
        The original character
    """
    return UniAz(alphabet).decrypt(text)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    codec = UniAz()
    for character in "A你😀":
        encoded = codec.encrypt(character)
        print(f"{character!r} -> {encoded}")
        assert codec.decrypt(encoded) == character

    binary = UniAz(["0", "1"])
    encoded = binary.encrypt("€")
    print(f"'€' in base 2 -> {encoded}")
    assert binary.decrypt(encoded) == "€"

    sentence = codec.encrypt_str("你好世界")
    print(f"'你好世界' -> {sentence}")
    assert codec.decrypt_str(sentence) == "你好世界"

    try:
        codec.decrypt("1")
        print("ERROR: foreign symbol not detected!")
    except UniAzError as e:
        print(f"Correctly rejected input: {e}")

    print("Codec checks passed!")
