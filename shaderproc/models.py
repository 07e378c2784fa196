from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

from .classify import ShaderStage, detect_stage

OUTPUT_EXTENSION = ".bin"


@dataclass(frozen=True)
class ShaderFile:
    """A discovered shader source and the artifact it compiles to."""

    source: Path
    output: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "source", Path(self.source).absolute())
        object.__setattr__(self, "output", Path(self.output).absolute())

    @classmethod
    def from_source(
        cls,
        source: Union[str, Path],
        output_dir: Union[str, Path],
        output_extension: str = OUTPUT_EXTENSION,
    ) -> "ShaderFile":
        src = Path(source)
        return cls(source=src, output=Path(output_dir) / (src.stem + output_extension))

    @property
    def filename(self) -> str:
        return self.source.name

    @property
    def stage(self) -> ShaderStage:
        return detect_stage(self.source)


@dataclass(frozen=True)
class CompileTask:
    shader: ShaderFile
    executable: Path
    args: Tuple[str, ...]

    @property
    def command_line(self) -> str:
        # Tokens containing whitespace come out double-quoted.
        return subprocess.list2cmdline([str(self.executable), *self.args])


@dataclass(frozen=True)
class ProcessResult:
    """Outcome of one compiler invocation."""

    launched: bool
    exit_code: Optional[int] = None
    error: Optional[str] = None
    errno: Optional[int] = None

    @classmethod
    def completed(cls, exit_code: int) -> "ProcessResult":
        return cls(launched=True, exit_code=exit_code)

    @classmethod
    def launch_failure(cls, message: str, errno: Optional[int] = None) -> "ProcessResult":
        return cls(launched=False, error=message, errno=errno)

    def succeeded(self, check_exit_code: bool = False) -> bool:
        # A timed-out child was launched but still carries an error.
        if not self.launched or self.error is not None:
            return False
        return not check_exit_code or self.exit_code == 0

    @property
    def diagnostic(self) -> str:
        if self.error is None:
            return f"exit code {self.exit_code}"
        if self.errno is None:
            return self.error
        return f"{self.error} (errno {self.errno})"
