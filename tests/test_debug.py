import logging

import pytest

from debug import COMPONENTS, Debug


@pytest.fixture
def dbg():
    d = Debug()
    saved, was_enabled = d.status(), d.enabled
    yield d
    d.toggle_global(was_enabled)
    for name, state in saved.items():
        (d.enable if state else d.disable)(name)


def test_log_only_when_component_and_global_switch_are_on(dbg, caplog):
    caplog.set_level(logging.DEBUG, logger="CRYPTDESK")
    dbg.toggle_global(True)
    dbg.disable("cfb")

    dbg.log("cfb", "hidden")
    dbg.enable("cfb")
    dbg.log("cfb", "shown")
    dbg.toggle_global(False)
    dbg.log("cfb", "hidden again")

    messages = [r.getMessage() for r in caplog.records if r.name == "CRYPTDESK"]
    assert messages == ["[CFB] shown"]


def test_switches_are_shared_between_instances(dbg):
    dbg.enable("stepping")
    assert Debug().status()["stepping"] is True
    assert Debug().is_active("stepping") is dbg.enabled


def test_toggle(dbg):
    before = dbg.status()["packer"]
    dbg.toggle("packer")
    assert dbg.status()["packer"] is (not before)


def test_status_is_a_copy(dbg):
    status = dbg.status()
    status["xxtea"] = "tampered"
    assert dbg.status()["xxtea"] in (True, False)
    assert set(status) == set(COMPONENTS)


def test_unknown_component(dbg):
    with pytest.raises(ValueError):
        dbg.enable("warp-drive")
    with pytest.raises(ValueError):
        dbg.toggle("warp-drive")


def test_repr_lists_active_components(dbg):
    for name in COMPONENTS:
        dbg.disable(name)
    dbg.enable("rotor")
    assert "active=['rotor']" in repr(dbg)
