import copy
import pickle
import string
import threading
import time

import pytest

from uniaz import (
    Alphabet, Codec, EmptyEncoding, InvalidAlphabet, InvalidScalarValue,
    NonCanonicalEncoding, UniAz, UniAzError, UnknownSymbol, decrypt, encrypt
)
from uniaz.base_convert import digit_count, to_digits
from uniaz.permutation import permute_digits

from conftest import scalar_values


def _craft(value, alphabet):
    """Encode an arbitrary integer the way encrypt() lays out digits."""
    base = alphabet.size()
    digits = permute_digits(to_digits(value, base), base)
    return ''.join(alphabet.symbol_at(d) for d in digits)


@pytest.mark.parametrize("character", ["A", "你", "😀", "\x00", "a", "~", "\U0010FFFF", "￿"])
def test_round_trip_default_alphabet(codec, character):
    encoded = codec.encrypt(character)
    assert encoded
    assert codec.decrypt(encoded) == character


def test_binary_alphabet_round_trips_euro():
    binary = Codec(["0", "1"])
    encoded = binary.encrypt("€")
    assert set(encoded) <= {"0", "1"}
    assert len(encoded) == 14
    assert binary.decrypt(encoded) == "€"


@pytest.mark.parametrize("symbols", ["01", "abc", "0123456789", "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "αβγδ", "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"])
@pytest.mark.parametrize("rounds", [0, 2])
def test_round_trip_custom_alphabets(symbols, rounds):
    codec = UniAz(symbols, rounds=rounds)
    for value in scalar_values(step=4099):
        character = chr(value)
        encoded = codec.encrypt(character)
        assert set(encoded) <= set(symbols)
        assert codec.decrypt(encoded) == character
        assert codec.encrypt(codec.decrypt(encoded)) == encoded


def test_strided_sweep_is_injective_and_closed(codec):
    seen = {}
    letters = set(codec.alphabet)
    for value in scalar_values(step=37):
        encoded = codec.encrypt(chr(value))
        assert set(encoded) <= letters
        assert encoded not in seen
        seen[encoded] = value
        assert codec.decrypt(encoded) == chr(value)


def test_injective_over_first_plane(codec):
    encodings = {codec.encrypt(chr(v)) for v in scalar_values() if v < 0x10000}
    assert len(encodings) == 0x10000 - 0x800


@pytest.mark.slow
def test_full_unicode_range_round_trip(codec):
    for value in scalar_values():
        assert codec.decrypt(codec.encrypt(chr(value))) == chr(value)


def test_default_output_is_permuted(codec):
    # 'A' is 65 = [2, 13] in base 26; a plain rendering would be "cn"
    assert codec.encrypt("A") == "dp"
    assert codec.decrypt("dp") == "A"
    assert codec.encrypt("\x00") == "b"


def test_mixing_rounds_change_output():
    plain = UniAz()
    mixed = UniAz(rounds=2)
    assert plain.encrypt("你") != mixed.encrypt("你")
    assert mixed.decrypt(mixed.encrypt("你")) == "你"


def test_decrypt_foreign_symbol(codec):
    with pytest.raises(UnknownSymbol) as excinfo:
        codec.decrypt("1")
    assert excinfo.value.symbol == "1"
    with pytest.raises(UnknownSymbol):
        codec.decrypt("ab12")
    with pytest.raises(UnknownSymbol):
        codec.decrypt("AB")


@pytest.mark.parametrize("value", [0xD800, 0xDBFF, 0xDFFF, 0x110000, 0x7FFFFFFF])
def test_decrypt_invalid_scalar_value(codec, value):
    crafted = _craft(value, codec.alphabet)
    with pytest.raises(InvalidScalarValue) as excinfo:
        codec.decrypt(crafted)
    assert excinfo.value.value == value


def test_decrypt_non_canonical(codec):
    # Symbol whose position-0 digit unpermutes to 0
    leading_zero = codec.alphabet.symbol_at(permute_digits([0], 26)[0])
    with pytest.raises(NonCanonicalEncoding):
        codec.decrypt(leading_zero + "a")
    assert codec.decrypt(leading_zero) == "\x00"


def test_decrypt_empty(codec):
    with pytest.raises(EmptyEncoding):
        codec.decrypt("")


@pytest.mark.parametrize("bad", ["", "ab", 65, None])
def test_encrypt_requires_single_character(codec, bad):
    with pytest.raises(ValueError):
        codec.encrypt(bad)


def test_encrypt_rejects_lone_surrogate(codec):
    with pytest.raises(InvalidScalarValue):
        codec.encrypt("\ud800")


def test_string_round_trip(codec):
    encoded = codec.encrypt_str("你好世界")
    assert len(encoded.split(" ")) == 4
    assert codec.decrypt_str(encoded) == "你好世界"
    assert codec.encrypt_str("") == ""
    assert codec.decrypt_str("") == ""


def test_string_round_trip_custom_separator():
    codec = UniAz("01", separator=",")
    text = "héllo, wörld 😀"
    encoded = codec.encrypt_str(text)
    assert codec.decrypt_str(encoded) == text


@pytest.mark.parametrize("encoded", ["dp  dp", " dp", "dp "])
def test_decrypt_str_rejects_empty_tokens(codec, encoded):
    with pytest.raises(EmptyEncoding):
        codec.decrypt_str(encoded)


@pytest.mark.parametrize("symbols, separator", [("abc", "b"), ("abc", ""), ("a b", " ")])
def test_separator_must_not_clash(symbols, separator):
    with pytest.raises(InvalidAlphabet):
        UniAz(symbols, separator=separator)


@pytest.mark.parametrize("symbols", ["", "a", "aa", ["0", "1", "1"]])
def test_invalid_alphabet_blocks_construction(symbols):
    with pytest.raises(InvalidAlphabet):
        UniAz(symbols)


def test_negative_rounds():
    with pytest.raises(ValueError):
        UniAz(rounds=-1)


def test_accepts_alphabet_instance():
    alphabet = Alphabet("0123456789")
    codec = UniAz(alphabet)
    assert codec.alphabet is alphabet
    assert codec.encrypt("x").isdigit()


def test_module_level_helpers():
    assert decrypt(encrypt("你")) == "你"
    assert decrypt(encrypt("€", alphabet="01"), alphabet="01") == "€"
    assert encrypt("A") == UniAz().encrypt("A")


def test_errors_share_base_class(codec):
    for call in (lambda: codec.decrypt("1"), lambda: codec.decrypt(""), lambda: UniAz("a")):
        with pytest.raises(UniAzError):
            call()


def test_shared_codec_across_threads(codec):
    text = "UniAz 你好 😀 ÀÉÎ"
    expected = codec.encrypt_str(text)
    results = []

    def worker():
        for _ in range(50):
            results.append(codec.decrypt_str(codec.encrypt_str(text)) == text
                           and codec.encrypt_str(text) == expected)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(results) == 400
    assert all(results)


@pytest.mark.parametrize("symbols", [[" ", "x"], string.printable[:95], " |,;-.\t\nab"])
def test_alphabet_with_space_round_trips(symbols):
    codec = UniAz(symbols)
    for character in "€A你😀 ":
        encoded = codec.encrypt(character)
        assert set(encoded) <= set(symbols)
        assert codec.decrypt(encoded) == character
    assert codec.separator not in codec.alphabet
    assert codec.decrypt_str(codec.encrypt_str("a b€")) == "a b€"


def test_default_separator_falls_back_in_order():
    assert UniAz().separator == " "
    assert UniAz(" x").separator == "|"
    assert UniAz(" |,x").separator == ";"
    assert UniAz(" |,;-.\t\n").separator == "!"


def test_module_helpers_accept_space_alphabet():
    assert decrypt(encrypt("€", alphabet=" x"), alphabet=" x") == "€"


@pytest.mark.parametrize("rounds", [0, 2])
def test_decrypt_rejects_overlong_token(rounds):
    codec = UniAz(rounds=rounds)
    start = time.perf_counter()
    with pytest.raises(InvalidScalarValue) as excinfo:
        codec.decrypt("b" * 600)
    assert time.perf_counter() - start < 0.5
    assert excinfo.value.value is None


def test_longest_valid_token_is_accepted():
    binary = UniAz("01")
    encoded = binary.encrypt("\U0010FFFF")
    assert len(encoded) == digit_count(0x10FFFF, 2) == 21
    assert binary.decrypt(encoded) == "\U0010FFFF"
    with pytest.raises(InvalidScalarValue):
        binary.decrypt(encoded + "0")


def test_codec_can_be_copied_and_pickled(codec):
    for clone in (copy.deepcopy(codec), pickle.loads(pickle.dumps(codec))):
        assert clone.alphabet == codec.alphabet
        assert clone.encrypt("你") == codec.encrypt("你")
