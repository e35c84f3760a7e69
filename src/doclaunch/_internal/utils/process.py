# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Subprocess helpers and typed command wrappers."""

from __future__ import annotations

import logging
import shlex
import subprocess  # noqa: S404  # JUSTIFIED: centralised wrapper for argv-only subprocess execution
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from doclaunch.core.model_types import LogComponent
from doclaunch.logging import structured_extra

logger: logging.Logger = logging.getLogger("doclaunch.internal.process")

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

__all__ = ["CommandOutput", "format_command", "run_command"]


@dataclass(slots=True)
class CommandOutput:
    args: list[str]
    exit_code: int
    duration_ms: float


def format_command(argv: Sequence[str]) -> str:
    """Render an argument vector the way a shell trace would print it."""
    return shlex.join(argv)


def run_command(
    args: Iterable[str],
    cwd: Path | None = None,
) -> CommandOutput:
    """Run a subprocess in the foreground and wait for it to finish.

    The child inherits stdin/stdout/stderr, so interactive tools and
    progress output reach the terminal unchanged. The command line is
    logged as a ``+ <argv>`` trace line before execution.

    Security guardrails:
    - Requires an iterable of string arguments; never uses ``shell=True``.

    Args:
        args: Command line to execute. The first element is treated as the
            executable and must be a non-empty string.
        cwd: Optional working directory for the child process.

    Returns:
        ``CommandOutput`` containing the executed argument vector, the exit
        code, and the duration in milliseconds.

    Raises:
        ValueError: If ``args`` is empty.
        TypeError: If any argument is falsy (for example ``""``).
        FileNotFoundError: If the executable cannot be started.
    """
    argv: list[str] = list(args)
    if not argv:
        raise ValueError
    if not all(a for a in argv):
        raise TypeError
    executable = argv[0]
    details: dict[str, object] = {}
    if cwd:
        details["cwd"] = str(cwd)
    logger.info(
        "+ %s",
        format_command(argv),
        extra=structured_extra(LogComponent.PROCESS, tool=executable, details=details),
    )
    start = time.perf_counter()
    completed = subprocess.run(  # noqa: S603 - command arguments provided by caller
        argv,
        check=False,
        cwd=str(cwd) if cwd else None,
    )
    duration_ms = (time.perf_counter() - start) * 1000
    if completed.returncode != 0:
        logger.warning(
            "Command failed (exit=%s): %s",
            completed.returncode,
            format_command(argv),
            extra=structured_extra(
                LogComponent.PROCESS,
                tool=executable,
                exit_code=completed.returncode,
                duration_ms=duration_ms,
            ),
        )
    else:
        logger.debug(
            "Command finished in %.1f ms: %s",
            duration_ms,
            format_command(argv),
            extra=structured_extra(LogComponent.PROCESS, tool=executable, exit_code=0, duration_ms=duration_ms),
        )
    return CommandOutput(args=argv, exit_code=completed.returncode, duration_ms=duration_ms)
