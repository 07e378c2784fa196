#!/usr/bin/env python3
"""
Compile bgfx-style shader sources (<name>.vs.sc / <name>.fs.sc) into <name>.*.bin.

Defaults to compile-on-change (skips if the .bin is newer than the .sc).
"""

from __future__ import annotations

from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from shaderproc.cli import main  # noqa: E402


if __name__ == "__main__":
    raise SystemExit(main())
