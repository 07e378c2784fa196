from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Dict, Iterable

from .base import Launcher
from .subprocess_launcher import DryRunLauncher, SubprocessLauncher

# Factories rather than instances: every lookup hands out a fresh launcher,
# so recorded state never leaks from one build into the next.
LauncherFactory = Callable[[], Launcher]

_factories: Dict[str, LauncherFactory] = {
    "subprocess": SubprocessLauncher,
    "dry-run": DryRunLauncher,
}
_active_name: str = "subprocess"


def register_launcher(name: str, factory: LauncherFactory) -> None:
    _factories[name] = factory


def unregister_launcher(name: str) -> None:
    if name in ("subprocess", "dry-run"):
        raise ValueError(f"Cannot remove built-in launcher: {name}")
    global _active_name
    _factories.pop(name, None)
    if _active_name == name:
        _active_name = "subprocess"


def get_registered(name: str) -> Launcher:
    if name not in _factories:
        raise ValueError(f"Unknown launcher: {name}")
    return _factories[name]()


def set_launcher(name: str) -> None:
    if name not in _factories:
        raise ValueError(f"Unknown launcher: {name}")
    global _active_name
    _active_name = name


def active_launcher_name() -> str:
    return _active_name


def get_launcher() -> Launcher:
    return get_registered(_active_name)


@contextmanager
def use_launcher(name: str):
    previous = _active_name
    set_launcher(name)
    try:
        yield get_launcher()
    finally:
        set_launcher(previous)


def list_launchers() -> Iterable[str]:
    return tuple(_factories.keys())
