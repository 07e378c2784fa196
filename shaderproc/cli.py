from __future__ import annotations

import argparse
import logging
import subprocess
from pathlib import Path
from typing import List, Optional

from .config import BuildConfig, config_from_mapping, load_config
from .launcher import DryRunLauncher
from .log import LogFn, logger_sink, prefixed, print_sink
from .orchestrator import compile_shaders

LOG_TAG = "[shaderc]"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Compile <name>.vs.sc / <name>.fs.sc shaders with shaderc when stale.")
    ap.add_argument("--config", type=Path, help="YAML file with build settings")
    ap.add_argument("--source-dir", type=Path, help="Directory holding *.sc shader sources")
    ap.add_argument("--output-dir", type=Path, help="Directory receiving compiled *.bin files")
    ap.add_argument("--tool-dir", type=Path, help="Directory holding shadercRelease and varying.def.sc")
    ap.add_argument("--platform", help="Value for shaderc --platform (default: windows)")
    ap.add_argument("--profile", help="Value for shaderc --profile (default: 120)")
    ap.add_argument("--timeout", type=float, help="Kill a compiler run after this many seconds")
    ap.add_argument(
        "--check-exit-code",
        action="store_true",
        default=None,
        help="Treat a non-zero compiler exit code as a failure",
    )
    ap.add_argument("--force", action="store_true", default=None, help="Recompile even if output is newer")
    ap.add_argument("--dry-run", action="store_true", help="Print what would be compiled; runs nothing and creates no folders")
    ap.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Send status lines through the logging module instead of plain stdout (failures at WARNING)",
    )
    return ap.parse_args(argv)


def build_config(args: argparse.Namespace) -> BuildConfig:
    overrides = dict(
        source_dir=args.source_dir,
        output_dir=args.output_dir,
        tool_dir=args.tool_dir,
        platform=args.platform,
        profile=args.profile,
        timeout=args.timeout,
        check_exit_code=args.check_exit_code,
        force=args.force,
    )
    try:
        if args.config is not None:
            if not args.config.is_file():
                raise SystemExit(f"Missing config file: {args.config}")
            return load_config(args.config).replace(**overrides)
        return config_from_mapping({key: value for key, value in overrides.items() if value is not None})
    except ValueError as exc:
        raise SystemExit(f"Invalid shader build config: {exc}") from exc


def make_sink(log_level: Optional[str]) -> LogFn:
    if log_level is None:
        return prefixed(LOG_TAG, print_sink)
    logging.basicConfig(level=log_level, format="%(asctime)s  %(levelname)-8s  %(message)s", datefmt="%H:%M:%S")
    logger = logging.getLogger("shaderproc")
    logger.setLevel(log_level)
    return logger_sink(logger)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    config = build_config(args)
    log = make_sink(args.log_level)
    launcher = DryRunLauncher() if args.dry_run else None
    report = compile_shaders(config, launcher=launcher, log=log)
    if launcher is not None:
        for executable, cmd_args in launcher.history:
            log(f"would run: {subprocess.list2cmdline([executable, *cmd_args])}")
    return report.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
