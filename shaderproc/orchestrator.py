from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .classify import ShaderStage, stage_name
from .command import make_compile_task
from .config import BuildConfig
from .discovery import find_shader_files
from .launcher import Launcher, SubprocessLauncher, get_launcher
from .log import LogFn, print_sink
from .models import CompileTask, ProcessResult, ShaderFile
from .staleness import needs_rebuild


class FileState(Enum):
    SKIPPED_UNKNOWN = "skipped-unknown"
    SKIPPED_UP_TO_DATE = "skipped-up-to-date"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class FileOutcome:
    shader: ShaderFile
    state: FileState
    result: Optional[ProcessResult] = None


@dataclass
class BuildReport:
    """Terminal state of every discovered file in one build pass."""

    outcomes: List[FileOutcome] = field(default_factory=list)

    def _count(self, *states: FileState) -> int:
        return sum(1 for outcome in self.outcomes if outcome.state in states)

    @property
    def compiled(self) -> int:
        return self._count(FileState.SUCCEEDED)

    @property
    def failed(self) -> int:
        return self._count(FileState.FAILED)

    @property
    def skipped(self) -> int:
        return self._count(FileState.SKIPPED_UNKNOWN, FileState.SKIPPED_UP_TO_DATE)

    @property
    def ok(self) -> bool:
        return self.failed == 0

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1

    def summary(self) -> str:
        return f"compiled {self.compiled}, skipped {self.skipped}, failed {self.failed}"


def _default_launcher(config: BuildConfig) -> Launcher:
    active = get_launcher()
    if config.timeout is not None and isinstance(active, SubprocessLauncher):
        return SubprocessLauncher(timeout=config.timeout)
    return active


class BuildOrchestrator:
    """
    Sequential incremental build over one shader directory.

    Each discovered file goes through classify -> staleness -> command ->
    launch, ending in exactly one ``FileState``. Failures are logged and the
    loop moves on to the next file; nothing is retried.
    """

    def __init__(
        self,
        config: BuildConfig,
        *,
        launcher: Optional[Launcher] = None,
        log: LogFn = print_sink,
    ):
        self.config = config
        self.launcher = launcher or _default_launcher(config)
        self.log = log

    def discover(self) -> List[ShaderFile]:
        sources = find_shader_files(self.config.source_dir, self.config.source_extension)
        if not sources and not self.config.source_dir.is_dir():
            self.log(f"Invalid path for shader folder : {self.config.source_dir}")
        return [
            ShaderFile.from_source(src, self.config.output_dir, self.config.output_extension)
            for src in sources
        ]

    def ensure_output_dir(self) -> None:
        out_dir = self.config.output_dir
        if out_dir.is_dir():
            return
        if not self.launcher.spawns_processes:
            self.log(f"Would create output folder : {out_dir}")
            return
        out_dir.mkdir(exist_ok=True)
        self.log(f"Created output folder : {out_dir}")

    def plan(self, shader: ShaderFile) -> Optional[CompileTask]:
        """Return the task for ``shader``, or None when it is skipped."""
        if shader.stage is ShaderStage.UNKNOWN:
            return None
        if not self.config.force and not needs_rebuild(shader.source, shader.output):
            return None
        return make_compile_task(shader, self.config)

    def process(self, shader: ShaderFile) -> FileOutcome:
        self.log(f"Discovered shader file : {shader.source}")
        stage = shader.stage
        if stage is ShaderStage.UNKNOWN:
            self.log(f"Skipping {shader.filename} (Unknown type)")
            return FileOutcome(shader, FileState.SKIPPED_UNKNOWN)
        self.log(f"{shader.filename} is {stage_name(stage)}")

        task = self.plan(shader)
        if task is None:
            self.log(f"Skipping file : {shader.source} (up to date)")
            return FileOutcome(shader, FileState.SKIPPED_UP_TO_DATE)

        result = self.launcher.launch(task.executable, task.args)
        if result.succeeded(check_exit_code=self.config.check_exit_code):
            self.log(f"Successfully processed shader : {shader.output}")
            return FileOutcome(shader, FileState.SUCCEEDED, result)
        self.log(f"Failed to process shader : {shader.source} ({result.diagnostic})")
        self.log(f"Failed command : {task.command_line}")
        return FileOutcome(shader, FileState.FAILED, result)

    def run(self) -> BuildReport:
        shaders = self.discover()
        self.ensure_output_dir()
        report = BuildReport()
        for shader in shaders:
            report.outcomes.append(self.process(shader))
        self.log(f"Shader build finished : {report.summary()}")
        return report


def compile_shaders(
    config: BuildConfig,
    *,
    launcher: Optional[Launcher] = None,
    log: LogFn = print_sink,
) -> BuildReport:
    """One-shot build: ``BuildOrchestrator(config, ...).run()``."""
    return BuildOrchestrator(config, launcher=launcher, log=log).run()
