from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

COMPILER_NAME = "shadercRelease"
VARYING_NAME = "varying.def.sc"
EXE_SUFFIX = ".exe" if os.name == "nt" else ""

_PATH_FIELDS = ("source_dir", "output_dir", "tool_dir")
_TEXT_FIELDS = ("platform", "profile", "source_extension", "output_extension", "compiler_name", "varying_name")
_FLAG_FIELDS = ("check_exit_code", "force")


@dataclass(frozen=True)
class BuildConfig:
    """Read-only settings shared by every file in a build pass."""

    source_dir: Path
    output_dir: Path
    tool_dir: Path
    platform: str = "windows"
    profile: str = "120"
    source_extension: str = ".sc"
    output_extension: str = ".bin"
    compiler_name: str = COMPILER_NAME
    varying_name: str = VARYING_NAME
    timeout: Optional[float] = None
    check_exit_code: bool = False
    force: bool = False

    def __post_init__(self) -> None:
        for name in _PATH_FIELDS:
            try:
                object.__setattr__(self, name, Path(getattr(self, name)))
            except TypeError as exc:
                raise ValueError(f"{name} must be a path, got {getattr(self, name)!r}") from exc
        # YAML hands back ints for tokens like `profile: 120`.
        for name in _TEXT_FIELDS:
            value = getattr(self, name)
            if value is None or isinstance(value, (bool, dict, list)):
                raise ValueError(f"{name} must be a string, got {value!r}")
            object.__setattr__(self, name, str(value))
        for name in _FLAG_FIELDS:
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be true or false, got {getattr(self, name)!r}")
        if self.timeout is not None:
            if isinstance(self.timeout, bool):
                raise ValueError(f"timeout must be a number of seconds, got {self.timeout!r}")
            try:
                object.__setattr__(self, "timeout", float(self.timeout))
            except (TypeError, ValueError) as exc:
                raise ValueError(f"timeout must be a number of seconds, got {self.timeout!r}") from exc
        self.validate()

    def validate(self) -> None:
        for name in ("source_extension", "output_extension"):
            ext = getattr(self, name)
            if not ext.startswith(".") or len(ext) < 2:
                raise ValueError(f"{name} must look like '.ext', got {ext!r}")
        if self.source_extension == self.output_extension:
            raise ValueError("source and output extensions must differ")
        if not self.platform:
            raise ValueError("platform must be non-empty")
        if not self.profile:
            raise ValueError("profile must be non-empty")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("timeout must be positive when set")

    @property
    def compiler_path(self) -> Path:
        return (self.tool_dir / f"{self.compiler_name}{EXE_SUFFIX}").absolute()

    @property
    def varying_path(self) -> Path:
        return (self.tool_dir / self.varying_name).absolute()

    def replace(self, **overrides: Any) -> "BuildConfig":
        """Return a copy with the given fields changed; ``None`` values are ignored."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return dataclasses.replace(self, **changes)


def _field_names():
    return {f.name for f in dataclasses.fields(BuildConfig)}


def config_from_mapping(data: Dict[str, Any], base_dir: Optional[Path] = None) -> BuildConfig:
    """
    Build a config from a plain mapping (e.g. parsed YAML).

    Relative directory entries are resolved against ``base_dir`` when given.
    """
    unknown = set(data) - _field_names()
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")
    missing = [name for name in _PATH_FIELDS if not data.get(name)]
    if missing:
        raise ValueError(f"Missing config keys: {', '.join(missing)}")
    values = dict(data)
    if base_dir is not None:
        for name in _PATH_FIELDS:
            if not isinstance(values[name], (str, Path)):
                raise ValueError(f"{name} must be a path, got {values[name]!r}")
            path = Path(values[name])
            if not path.is_absolute():
                values[name] = base_dir / path
    return BuildConfig(**values)


def load_config(path: Union[str, Path]) -> BuildConfig:
    config_path = Path(path)
    with config_path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"{config_path}: expected a mapping at top level")
    return config_from_mapping(data, base_dir=config_path.parent.absolute())
