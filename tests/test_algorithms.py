import pytest

from algorithms import Algorithm, get_algorithm, run
from enigma_machine import Enigma
from errors import ConfigurationError
from settings import EnigmaArgs, SettingsState, XxteaArgs, XxteaCfbArgs
from suites import AlgorithmOption, Operation
from xxtea_cfb import XxteaCfb
from xxtea_cipher import Xxtea


@pytest.mark.parametrize(
    "option, cls",
    [
        (AlgorithmOption.ENIGMA, Enigma),
        (AlgorithmOption.XXTEA, Xxtea),
        (AlgorithmOption.XXTEA_CFB, XxteaCfb),
    ],
)
def test_factory_builds_selected_cipher(option, cls):
    assert isinstance(get_algorithm(SettingsState(algorithm_option=option)), cls)


def test_display_names():
    assert [str(o) for o in AlgorithmOption] == ["Enigma", "XXTEA", "XXTEA CFB"]


def test_default_settings_select_enigma():
    assert SettingsState().algorithm_option is AlgorithmOption.ENIGMA


@pytest.mark.parametrize("option", list(AlgorithmOption))
def test_every_cipher_round_trips_through_the_facade(option):
    alg: Algorithm = get_algorithm(SettingsState(algorithm_option=option))
    data = b"attack at dawn"

    encrypted = run(alg, Operation.ENCRYPT, data)
    decrypted = run(alg, Operation.DECRYPT, encrypted)

    expected = b"attackatdawn" if option is AlgorithmOption.ENIGMA else data
    assert decrypted == expected


def test_only_the_selected_settings_are_validated():
    settings = SettingsState(
        algorithm_option=AlgorithmOption.XXTEA,
        enigma_args=EnigmaArgs(refl_wiring=None),
        xxtea_cfb_args=XxteaCfbArgs(block_size="3"),
    )
    assert isinstance(get_algorithm(settings), Xxtea)


@pytest.mark.parametrize(
    "settings",
    [
        SettingsState(enigma_args=EnigmaArgs(rot1_notch="99")),
        SettingsState(algorithm_option=AlgorithmOption.XXTEA, xxtea_args=XxteaArgs(key=None)),
        SettingsState(
            algorithm_option=AlgorithmOption.XXTEA_CFB,
            xxtea_cfb_args=XxteaCfbArgs(iv="tiny"),
        ),
    ],
)
def test_factory_surfaces_configuration_errors(settings):
    with pytest.raises(ConfigurationError):
        get_algorithm(settings)


def test_settings_instances_do_not_share_args():
    a, b = SettingsState(), SettingsState()
    a.xxtea_args.key = "changed"
    assert b.xxtea_args.key == "SecureKey"
