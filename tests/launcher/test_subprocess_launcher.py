import sys

import pytest

from shaderproc.launcher import DryRunLauncher, SubprocessLauncher


def test_completed_process_reports_launched():
    result = SubprocessLauncher().launch(sys.executable, ["-c", "pass"])
    assert result.launched
    assert result.exit_code == 0
    assert result.succeeded()


def test_exit_code_recorded_but_not_failure_by_default():
    result = SubprocessLauncher().launch(sys.executable, ["-c", "import sys; sys.exit(3)"])
    assert result.launched
    assert result.exit_code == 3
    assert result.succeeded()
    assert not result.succeeded(check_exit_code=True)


def test_missing_executable_is_launch_failure(tmp_path):
    result = SubprocessLauncher().launch(tmp_path / "shadercRelease", ["-f", "x"])
    assert not result.launched
    assert result.errno is not None
    assert str(tmp_path / "shadercRelease") in result.diagnostic
    assert not result.succeeded()


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission bits")
def test_non_executable_file_is_launch_failure(tmp_path):
    fake = tmp_path / "shadercRelease"
    fake.write_text("not a program")
    fake.chmod(0o644)
    result = SubprocessLauncher().launch(fake, [])
    assert not result.launched
    assert result.error


def test_timeout_kills_and_fails():
    launcher = SubprocessLauncher(timeout=0.2)
    result = launcher.launch(sys.executable, ["-c", "import time; time.sleep(30)"])
    assert result.launched
    assert "timed out" in result.diagnostic
    assert not result.succeeded()


def test_timeout_must_be_positive():
    with pytest.raises(ValueError):
        SubprocessLauncher(timeout=0)


def test_arguments_with_spaces_arrive_intact(tmp_path):
    marker = tmp_path / "args.txt"
    script = "import sys, pathlib; pathlib.Path(sys.argv[1]).write_text(sys.argv[2])"
    result = SubprocessLauncher().launch(sys.executable, ["-c", script, str(marker), "two words"])
    assert result.succeeded(check_exit_code=True)
    assert marker.read_text() == "two words"


def test_dry_run_spawns_nothing(tmp_path):
    launcher = DryRunLauncher()
    result = launcher.launch(tmp_path / "missing", ["-f", "a"])
    assert result.succeeded(check_exit_code=True)
    assert launcher.history == [(str(tmp_path / "missing"), ("-f", "a"))]
    assert not launcher.spawns_processes
    assert DryRunLauncher().history == []
