from __future__ import annotations

from pathlib import Path
from typing import List, Union

from .classify import ShaderStage, stage_name
from .config import VARYING_NAME, BuildConfig
from .models import CompileTask, ShaderFile


def build_compile_args(
    shader: ShaderFile,
    tool_dir: Union[str, Path],
    platform: str,
    profile: str,
    varying_name: str = VARYING_NAME,
) -> List[str]:
    """
    Argument list for one ``shaderc`` invocation.

    The tool directory doubles as the include path so shared headers next to
    the compiler resolve. All paths are absolute.
    """
    stage = shader.stage
    if stage is ShaderStage.UNKNOWN:
        raise ValueError(f"Cannot build compile args for unclassified shader: {shader.filename}")
    tool_root = Path(tool_dir).absolute()
    return [
        "-f", str(shader.source),
        "-o", str(shader.output),
        "--type", stage_name(stage),
        "--platform", platform,
        "--profile", str(profile),
        "-i", str(tool_root),
        "--varyingdef", str(tool_root / varying_name),
    ]


def make_compile_task(shader: ShaderFile, config: BuildConfig) -> CompileTask:
    args = build_compile_args(
        shader,
        config.tool_dir,
        config.platform,
        config.profile,
        varying_name=config.varying_name,
    )
    return CompileTask(shader=shader, executable=config.compiler_path, args=tuple(args))

