from .base import Launcher
from .registry import (
    LauncherFactory,
    active_launcher_name,
    get_launcher,
    get_registered,
    list_launchers,
    register_launcher,
    set_launcher,
    unregister_launcher,
    use_launcher,
)
from .subprocess_launcher import DryRunLauncher, SubprocessLauncher

__all__ = [
    "DryRunLauncher",
    "Launcher",
    "LauncherFactory",
    "SubprocessLauncher",
    "active_launcher_name",
    "get_launcher",
    "get_registered",
    "list_launchers",
    "register_launcher",
    "set_launcher",
    "unregister_launcher",
    "use_launcher",
]
