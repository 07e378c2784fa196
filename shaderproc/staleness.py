from __future__ import annotations

from pathlib import Path
from typing import Union


def needs_rebuild(source: Union[str, Path], output: Union[str, Path]) -> bool:
    """
    True unless ``output`` exists and is strictly newer than ``source``.

    Equal timestamps rebuild. Includes shared between shaders are not tracked.
    """
    out = Path(output)
    if not out.exists():
        return True
    return not out.stat().st_mtime_ns > Path(source).stat().st_mtime_ns
