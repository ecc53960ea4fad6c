"""
Codec Package

This package provides the public UniAz codec, which turns single Unicode
characters into alphabet-only strings and back.
"""

from .uniaz_codec import UniAz, Codec, encrypt, decrypt, CODEC_DEFAULT_PARAMS

__all__ = ['UniAz', 'Codec', 'encrypt', 'decrypt', 'CODEC_DEFAULT_PARAMS']
