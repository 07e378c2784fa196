from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from ..models import ProcessResult
from .base import Launcher


class SubprocessLauncher(Launcher):
    """Runs the compiler as a child process; its output goes straight to the console."""

    name = "subprocess"

    def __init__(self, timeout: Optional[float] = None):
        if timeout is not None and timeout <= 0:
            raise ValueError("timeout must be positive when set")
        self.timeout = timeout

    def launch(self, executable: Union[str, Path], args: Sequence[str]) -> ProcessResult:
        cmd = [str(executable), *args]
        try:
            proc = subprocess.run(cmd, timeout=self.timeout, check=False)
        except subprocess.TimeoutExpired:
            # run() has already killed and reaped the child.
            return ProcessResult(launched=True, error=f"timed out after {self.timeout:g} s")
        except OSError as exc:
            return ProcessResult.launch_failure(
                f"Failed to start process {executable}: {exc.strerror or exc}",
                errno=exc.errno,
            )
        return ProcessResult.completed(proc.returncode)


class DryRunLauncher(Launcher):
    """Records invocations without spawning anything."""

    name = "dry-run"
    spawns_processes = False

    def __init__(self):
        self.history: List[Tuple[str, Tuple[str, ...]]] = []

    def launch(self, executable: Union[str, Path], args: Sequence[str]) -> ProcessResult:
        self.history.append((str(executable), tuple(args)))
        return ProcessResult.completed(0)
