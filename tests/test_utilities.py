import pytest

from errors import ConfigurationError
from settings import EnigmaArgs, XxteaCfbArgs
from utilities import (
    parse_block_size,
    parse_enigma_args,
    parse_key,
    parse_notch,
    parse_plugboard,
    parse_position,
    parse_wiring,
    parse_xxtea_cfb_args,
    preprocess_message,
    reflector_dict,
    resolve_wiring,
    rotor_dict,
)


def test_parse_wiring_folds_case_and_strips():
    assert parse_wiring("  EKMFLGDQVZNTOWYHXUSPAIBRCJ ") == b"ekmflgdqvzntowyhxuspaibrcj"


@pytest.mark.parametrize(
    "wiring",
    [None, "", "abc", "ekmflgdqvzntowyhxuspaibrc1", "eemflgdqvzntowyhxuspaibrcj"],
)
def test_parse_wiring_rejects(wiring):
    with pytest.raises(ConfigurationError):
        parse_wiring(wiring, "rotor 1 wiring")


def test_error_names_the_field():
    with pytest.raises(ConfigurationError, match="rotor 2 notch"):
        parse_notch("30", "rotor 2 notch")


@pytest.mark.parametrize("text, value", [("0", 0), ("25", 25), (" 8 ", 8), ("08", 8)])
def test_parse_small_ints(text, value):
    assert parse_notch(text) == value
    assert parse_position(text) == value


@pytest.mark.parametrize("text", [None, "", "26", "-1", "1.5", "x", "٣"])
def test_parse_small_ints_rejects(text):
    with pytest.raises(ConfigurationError):
        parse_position(text)


def test_parse_plugboard_normalises():
    assert parse_plugboard("PO  ml\tIU") == "po ml iu"
    assert parse_plugboard("") == ""


def test_parse_enigma_args_defaults():
    config = parse_enigma_args(EnigmaArgs())

    assert config.reflector == b"yruhqsldpxngokmiebfzcwvjat"
    assert [r.notch for r in config.rotors] == [8, 8, 0]
    assert [r.position for r in config.rotors] == [0, 0, 0]
    assert config.rotors[0].wiring == b"ekmflgdqvzntowyhxuspaibrcj"
    assert config.plugboard == "po ml iu kj nh yt gb vf re dc"


def test_parse_key():
    assert parse_key("SecretKey") == (0x72636553, 0x654B7465, 0x79, 0)
    assert parse_key(b"SecretKey") == parse_key("SecretKey")
    with pytest.raises(ConfigurationError):
        parse_key("")


@pytest.mark.parametrize("value, size", [("8", 8), (" 16 ", 16), (12, 12)])
def test_parse_block_size(value, size):
    assert parse_block_size(value) == size


@pytest.mark.parametrize("value", [None, "", "7", "9", "-8", 4])
def test_parse_block_size_rejects(value):
    with pytest.raises(ConfigurationError):
        parse_block_size(value)


def test_parse_xxtea_cfb_args_keeps_one_block_of_iv():
    config = parse_xxtea_cfb_args(XxteaCfbArgs())

    assert config.block_size == 8
    assert config.iv == b"asdjgasd"


def test_iv_length_counts_utf8_bytes():
    config = parse_xxtea_cfb_args(XxteaCfbArgs(iv="ééééé", block_size="8"))
    assert len(config.iv) == 8


def test_preprocess_message():
    assert preprocess_message(b"Hello asdjfk df asdf asd") == b"helloasdjfkdfasdfasd"


def test_resolve_wiring():
    assert resolve_wiring("ii", rotor_dict) == "ajdksiruxblhwtmcqgznpyfvoe"
    assert resolve_wiring("B", reflector_dict) == "yruhqsldpxngokmiebfzcwvjat"
    assert resolve_wiring("bdfhjlcprtxvznyeiwgakmusqo", rotor_dict) == (
        "bdfhjlcprtxvznyeiwgakmusqo"
    )


def test_wheel_table_is_valid():
    for wiring in list(rotor_dict.values()) + list(reflector_dict.values()):
        assert parse_wiring(wiring) == wiring.encode()
