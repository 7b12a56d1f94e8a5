import pytest

from errors import CorruptionError
from word_packer import bytes_to_words, key_to_words, words_to_bytes


def test_little_endian_packing():
    assert bytes_to_words(b"\x01\x02\x03\x04\x05", False) == [0x04030201, 0x05]


def test_packing_appends_length_word():
    assert bytes_to_words(b"\x01\x02\x03\x04\x05", True) == [0x04030201, 0x05, 5]


def test_empty_buffer():
    assert bytes_to_words(b"", False) == []
    assert bytes_to_words(b"", True) == [0]
    assert words_to_bytes([0], True) == b""


def test_unpacking_without_length_keeps_padding():
    assert words_to_bytes([0x04030201, 0x05], False) == b"\x01\x02\x03\x04\x05\x00\x00\x00"


def test_length_word_strips_padding():
    starting = b"Hellouw"

    assert words_to_bytes(bytes_to_words(starting, True), True) == starting
    assert words_to_bytes(bytes_to_words(starting, False), False) != starting
    assert words_to_bytes(bytes_to_words(starting, False), False) == starting + b"\x00"


@pytest.mark.parametrize("length", [5, 6, 7, 8])
def test_accepted_length_window(length):
    words = [0x04030201, 0x08070605, length]
    assert words_to_bytes(words, True) == bytes(range(1, length + 1))


@pytest.mark.parametrize("length", [0, 4, 9, 0xFFFFFFFF])
def test_length_outside_window_is_corruption(length):
    with pytest.raises(CorruptionError):
        words_to_bytes([0x04030201, 0x08070605, length], True)


def test_missing_length_word_is_corruption():
    with pytest.raises(CorruptionError):
        words_to_bytes([], True)


def test_key_packing_pads_to_four_words():
    assert key_to_words(b"SecretKey") == (0x72636553, 0x654B7465, 0x79, 0)


def test_key_packing_truncates_to_four_words():
    key = bytes(range(1, 21))
    assert key_to_words(key) == (0x04030201, 0x08070605, 0x0C0B0A09, 0x100F0E0D)


def test_empty_key_packs_to_zero_words():
    assert key_to_words(b"") == (0, 0, 0, 0)
