from __future__ import annotations

import logging
from typing import Callable

# Status sink used by the orchestrator: one human-readable line per call.
LogFn = Callable[[str], None]


def print_sink(message: str) -> None:
    print(message, flush=True)


def null_sink(message: str) -> None:
    return


def prefixed(tag: str, sink: LogFn = print_sink) -> LogFn:
    """Wrap ``sink`` so every line starts with ``tag`` (e.g. ``[shaderc]``)."""

    def _log(message: str) -> None:
        sink(f"{tag} {message}")

    return _log


FAILURE_MARKER = "Failed"


def logger_sink(
    logger: logging.Logger,
    level: int = logging.INFO,
    failure_level: int = logging.WARNING,
) -> LogFn:
    """
    Route status lines into a stdlib logger for hosts that configure logging.

    Lines starting with ``Failed`` (per-file failures and launch diagnostics)
    go out at ``failure_level`` so they survive a WARNING threshold.
    """

    def _log(message: str) -> None:
        logger.log(failure_level if message.startswith(FAILURE_MARKER) else level, message)

    return _log
