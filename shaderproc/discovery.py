from __future__ import annotations

from pathlib import Path
from typing import List, Union

SOURCE_EXTENSION = ".sc"


def find_shader_files(directory: Union[str, Path], extension: str = SOURCE_EXTENSION) -> List[Path]:
    """
    List shader sources directly inside ``directory``.

    Not recursive. A missing path or a path that is not a directory yields an
    empty list. Order follows directory enumeration and is not sorted.
    """
    root = Path(directory)
    if not root.is_dir():
        return []
    return [entry for entry in root.iterdir() if entry.is_file() and entry.suffix == extension]
