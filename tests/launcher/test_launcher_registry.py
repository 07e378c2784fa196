import pytest

from shaderproc.launcher import (
    DryRunLauncher,
    SubprocessLauncher,
    active_launcher_name,
    get_launcher,
    get_registered,
    list_launchers,
    register_launcher,
    set_launcher,
    unregister_launcher,
    use_launcher,
)
from shaderproc.testing.mock_launchers import RecordingLauncher


def test_default_launcher_is_subprocess():
    assert isinstance(get_launcher(), SubprocessLauncher)
    assert {"subprocess", "dry-run"} <= set(list_launchers())


def test_use_launcher_restores_previous():
    before = active_launcher_name()
    with use_launcher("dry-run") as active:
        assert isinstance(active, DryRunLauncher)
        assert active_launcher_name() == "dry-run"
    assert active_launcher_name() == before


def test_lookups_hand_out_fresh_instances():
    first = get_registered("dry-run")
    first.launch("shadercRelease", ["-f", "a.vs.sc"])
    second = get_registered("dry-run")
    assert second is not first
    assert second.history == []


def test_unknown_launcher_rejected():
    with pytest.raises(ValueError):
        set_launcher("unknown")
    with pytest.raises(ValueError):
        get_registered("unknown")


def test_registered_launcher_selectable():
    register_launcher("recording", RecordingLauncher)
    try:
        with use_launcher("recording"):
            assert isinstance(get_launcher(), RecordingLauncher)
        assert active_launcher_name() == "subprocess"
    finally:
        unregister_launcher("recording")
    assert "recording" not in list_launchers()


def test_builtins_cannot_be_unregistered():
    with pytest.raises(ValueError):
        unregister_launcher("subprocess")
