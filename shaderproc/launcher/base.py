from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence, Union

from ..models import ProcessResult


class Launcher(ABC):
    """Starts an external executable and blocks until it exits."""

    name: str = "base"
    # False for launchers that only record; the build then leaves the filesystem alone.
    spawns_processes: bool = True

    @abstractmethod
    def launch(self, executable: Union[str, Path], args: Sequence[str]) -> ProcessResult:
        """
        Run ``executable`` with ``args`` and wait for it.

        Must not raise for OS-level launch failures; those come back as
        ``ProcessResult.launch_failure``.
        """
        raise NotImplementedError
