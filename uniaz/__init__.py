"""
UniAz - Unicode to Alphabet Cipher

This library turns any Unicode character into a reversible string made only
of a fixed alphabet (by default the lowercase Latin letters a-z), so text in
any script or emoji can pass through channels that only carry plain letters.

Key Features:
- Base-N rendering of the Unicode scalar value (N = alphabet size)
- Position-keyed digit permutation so output is not a plain numeral string
- Optional data-dependent mixing rounds
- Custom alphabets of any size >= 2
- Separator-joined encoding of whole strings

This is an obfuscating encoding, not a cryptographically secure cipher.
"""

from .alphabet import Alphabet, DEFAULT_SYMBOLS
from .codec import UniAz, Codec, encrypt, decrypt, CODEC_DEFAULT_PARAMS
from .errors import (
    UniAzError, InvalidAlphabet, IndexOutOfRange, UnknownSymbol, DigitOutOfRange,
    InvalidScalarValue, EmptyEncoding, NonCanonicalEncoding
)

__version__ = '0.1.0'
__author__ = 'UniAz Team'

__all__ = [
    'Alphabet', 'DEFAULT_SYMBOLS', 'UniAz', 'Codec', 'encrypt', 'decrypt',
    'CODEC_DEFAULT_PARAMS', 'UniAzError', 'InvalidAlphabet', 'IndexOutOfRange',
    'UnknownSymbol', 'DigitOutOfRange', 'InvalidScalarValue', 'EmptyEncoding',
    'NonCanonicalEncoding'
]
