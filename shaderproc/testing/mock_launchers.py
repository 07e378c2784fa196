from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from ..launcher import Launcher
from ..models import ProcessResult


class RecordingLauncher(Launcher):
    """Pretends every launch completes with ``exit_code``."""

    name = "recording"

    def __init__(self, exit_code: int = 0):
        self.exit_code = exit_code
        self.calls: List[Tuple[str, Tuple[str, ...]]] = []

    def launch(self, executable: Union[str, Path], args: Sequence[str]) -> ProcessResult:
        self.calls.append((str(executable), tuple(args)))
        return ProcessResult.completed(self.exit_code)

    @property
    def compiled_sources(self) -> List[str]:
        return [args[args.index("-f") + 1] for _, args in self.calls]


class FailingLauncher(RecordingLauncher):
    """Fails to launch anything whose input file name is in ``fail_on`` (all if None)."""

    name = "failing"

    def __init__(self, fail_on: Optional[Sequence[str]] = None, errno: int = 2):
        super().__init__()
        self.fail_on = set(fail_on) if fail_on is not None else None
        self.errno = errno

    def launch(self, executable: Union[str, Path], args: Sequence[str]) -> ProcessResult:
        result = super().launch(executable, args)
        source = Path(args[args.index("-f") + 1]).name
        if self.fail_on is None or source in self.fail_on:
            return ProcessResult.launch_failure(f"Failed to start process {executable}", errno=self.errno)
        return result


class CollectingSink:
    """Log sink that keeps every line for assertions."""

    def __init__(self):
        self.lines: List[str] = []

    def __call__(self, message: str) -> None:
        self.lines.append(message)

    def matching(self, fragment: str) -> List[str]:
        return [line for line in self.lines if fragment in line]
