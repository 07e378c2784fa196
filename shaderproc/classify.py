from __future__ import annotations

from enum import Enum
from pathlib import PurePath
from typing import Union

VERTEX_TAG = ".vs"
FRAGMENT_TAG = ".fs"


class ShaderStage(Enum):
    UNKNOWN = "unknown"
    VERTEX = "vertex"
    FRAGMENT = "fragment"


def detect_stage(path: Union[str, PurePath]) -> ShaderStage:
    """
    Classify a shader source by its two-level extension.

    ``water.vs.sc`` is a vertex shader, ``water.fs.sc`` a fragment shader.
    Only the filename is inspected; the file does not need to exist.
    """
    stem = PurePath(PurePath(path).name).stem
    tag = PurePath(stem).suffix
    if tag == VERTEX_TAG:
        return ShaderStage.VERTEX
    if tag == FRAGMENT_TAG:
        return ShaderStage.FRAGMENT
    return ShaderStage.UNKNOWN


def stage_name(stage: ShaderStage) -> str:
    """Value passed to the compiler's ``--type`` flag."""
    return stage.value
