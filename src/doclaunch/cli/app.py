# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""CLI entry point for the documentation launcher."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import TYPE_CHECKING, Final

from doclaunch import __version__
from doclaunch._internal.error_codes import error_code_for
from doclaunch._internal.exceptions import DoclaunchError
from doclaunch.cli.helpers import echo, register_argument
from doclaunch.config import LogSettingsError, load_config
from doclaunch.core.model_types import LogComponent, LogFormat
from doclaunch.launcher import enter_root, resolve_root, run
from doclaunch.logging import LOG_FORMAT_ENV, LOG_LEVEL_ENV, configure_logging, structured_extra

if TYPE_CHECKING:
    from collections.abc import Sequence

    from doclaunch.config import LauncherSettings

logger: logging.Logger = logging.getLogger("doclaunch.cli")

DOCLAUNCH_VERSION: Final[str] = __version__


def main(
    argv: Sequence[str] | None = None,
    *,
    script_path: str | os.PathLike[str] | None = None,
) -> int:
    """Build the project documentation and open it in a viewer.

    Args:
        argv: Command-line arguments to parse. If None, uses sys.argv.
        script_path: Path of the launcher script. The project root is the
            parent of its directory. Defaults to ``sys.argv[0]``.

    Returns:
        int: ``0`` when every step succeeds, otherwise the exit status of the
        first failing step.
    """
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.version:
        echo(f"doclaunch {DOCLAUNCH_VERSION}")
        return 0
    try:
        _configure_env_logging()
        root = enter_root(resolve_root(script_path if script_path is not None else sys.argv[0]))
        settings = load_config(root)
        _apply_project_logging(settings)
        _ = run(root, build_tool=settings.build_tool)
    except DoclaunchError as exc:
        code = error_code_for(exc)
        logger.error(  # noqa: TRY400 - the trace above already shows the failing step
            "[%s] %s",
            code,
            exc,
            extra=structured_extra(LogComponent.CLI, exit_code=exc.exit_code, error_code=code),
        )
        return exc.exit_code
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="doclaunch",
        description=(
            "Build the project's API documentation with "
            "`cargo doc --open --no-deps --document-private-items` "
            "from the directory above this launcher."
        ),
        epilog=f"Logging is controlled by {LOG_FORMAT_ENV} (text|json) and {LOG_LEVEL_ENV}.",
    )
    register_argument(
        parser,
        "--version",
        action="store_true",
        help="Print the doclaunch version and exit.",
    )
    return parser


def _configure_env_logging() -> None:
    """Configure logging from the environment, falling back to text on a bad format.

    Raises:
        LogSettingsError: If ``DOCLAUNCH_LOG_FORMAT`` names an unknown format.
    """
    try:
        _ = configure_logging()
    except ValueError as exc:
        _ = configure_logging(LogFormat.TEXT)
        raise LogSettingsError(LOG_FORMAT_ENV, os.getenv(LOG_FORMAT_ENV, "")) from exc


def _apply_project_logging(settings: LauncherSettings) -> None:
    """Reconfigure logging from project settings; environment variables win."""
    log_format = None if os.getenv(LOG_FORMAT_ENV) else settings.log_format
    log_level = None if os.getenv(LOG_LEVEL_ENV) else settings.log_level
    if log_format is None and log_level is None:
        return
    _ = configure_logging(log_format, log_level=log_level)


__all__ = ["main"]
