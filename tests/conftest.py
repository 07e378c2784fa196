"""
Test configuration to ensure the repository root is importable as a module path.

This makes `import shaderproc` work when running `pytest` from the repo root
without installing the package. Also provides small filesystem fixtures for
shader build trees.
"""

import os
import sys
from pathlib import Path
from typing import Optional

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def _touch(path: Path, mtime_ns: Optional[int] = None) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("// shader\n", encoding="utf-8")
    if mtime_ns is not None:
        os.utime(path, ns=(mtime_ns, mtime_ns))
    return path


@pytest.fixture
def touch():
    """Write a small file, optionally pinning its mtime (nanoseconds)."""
    return _touch


@pytest.fixture
def shader_tree(tmp_path):
    """source/, tools/ (with varying.def.sc) and a not-yet-created bin/."""
    source = tmp_path / "shaders"
    tools = tmp_path / "tools"
    source.mkdir()
    tools.mkdir()
    _touch(tools / "varying.def.sc")
    return source, tmp_path / "bin", tools
