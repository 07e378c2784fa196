from .classify import ShaderStage, detect_stage, stage_name
from .command import build_compile_args, make_compile_task
from .config import BuildConfig, config_from_mapping, load_config
from .discovery import find_shader_files
from .log import LogFn, logger_sink, null_sink, prefixed, print_sink
from .models import CompileTask, ProcessResult, ShaderFile
from .orchestrator import BuildOrchestrator, BuildReport, FileOutcome, FileState, compile_shaders
from .staleness import needs_rebuild

__all__ = [
    "BuildConfig",
    "BuildOrchestrator",
    "BuildReport",
    "CompileTask",
    "FileOutcome",
    "FileState",
    "LogFn",
    "ProcessResult",
    "ShaderFile",
    "ShaderStage",
    "build_compile_args",
    "compile_shaders",
    "config_from_mapping",
    "detect_stage",
    "find_shader_files",
    "load_config",
    "logger_sink",
    "make_compile_task",
    "needs_rebuild",
    "null_sink",
    "prefixed",
    "print_sink",
    "stage_name",
]
