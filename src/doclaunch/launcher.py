# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Resolve the project root and run ``cargo doc`` from it.

The launcher is deliberately small: it locates the project root relative to
the launcher script, checks that the root is a usable directory, and runs
the documentation build there with a fixed set of flags. Every step is
traced (``+ cd <root>``, ``+ cargo doc ...``) and the first failing step
stops the launch.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Final

from doclaunch._internal.exceptions import DoclaunchError
from doclaunch._internal.utils import format_command, run_command
from doclaunch.core.model_types import LogComponent
from doclaunch.logging import structured_extra

if TYPE_CHECKING:
    from doclaunch._internal.utils import CommandOutput

logger: logging.Logger = logging.getLogger("doclaunch.launcher")

DEFAULT_BUILD_TOOL: Final[str] = "cargo"
COMMAND_NOT_FOUND_EXIT: Final[int] = 127

__all__ = [
    "COMMAND_NOT_FOUND_EXIT",
    "DEFAULT_BUILD_TOOL",
    "BuildToolNotFoundError",
    "DocBuildCommand",
    "DocBuildFailedError",
    "LaunchError",
    "LaunchResult",
    "ProjectRootError",
    "enter_root",
    "launch",
    "resolve_root",
    "run",
]


class LaunchError(DoclaunchError):
    """Raised when a launch step fails."""


class ProjectRootError(LaunchError):
    """Raised when the resolved project root cannot be entered."""

    def __init__(self, root: Path) -> None:
        self.root = root
        super().__init__(f"cannot enter project root {root}: no such directory")


class BuildToolNotFoundError(LaunchError):
    """Raised when the documentation build tool cannot be found or started."""

    exit_code = COMMAND_NOT_FOUND_EXIT

    def __init__(self, tool: str) -> None:
        self.tool = tool
        super().__init__(f"{tool}: command not found")


class DocBuildFailedError(LaunchError):
    """Raised when the documentation build exits with a non-zero status."""

    def __init__(self, command: list[str], exit_code: int) -> None:
        self.command = command
        self.exit_code = exit_code
        super().__init__(f"documentation build failed (exit={exit_code}): {format_command(command)}")


@dataclass(slots=True, frozen=True)
class DocBuildCommand:
    """The documentation build invocation.

    The three options are fixed: the docs are opened in a viewer once built,
    dependency crates are left out, and private items are documented.
    """

    SUBCOMMAND: ClassVar[str] = "doc"
    OPEN_FLAG: ClassVar[str] = "--open"
    NO_DEPS_FLAG: ClassVar[str] = "--no-deps"
    PRIVATE_ITEMS_FLAG: ClassVar[str] = "--document-private-items"

    build_tool: str = DEFAULT_BUILD_TOOL

    @property
    def open_viewer(self) -> bool:
        return True

    @property
    def include_dependencies(self) -> bool:
        return False

    @property
    def include_private_items(self) -> bool:
        return True

    def argv(self) -> list[str]:
        return [
            self.build_tool,
            self.SUBCOMMAND,
            self.OPEN_FLAG,
            self.NO_DEPS_FLAG,
            self.PRIVATE_ITEMS_FLAG,
        ]


@dataclass(slots=True)
class LaunchResult:
    root: Path
    command: list[str]
    exit_code: int
    duration_ms: float


def resolve_root(script_path: str | os.PathLike[str]) -> Path:
    """Return the project root for a launcher script.

    The root is the parent of the directory that contains the script. The
    path is made absolute against the current working directory and then
    collapsed lexically, the same way a shell's logical ``cd`` treats
    ``..``; symlinks are not followed.

    Args:
        script_path: The launcher script's own path, as passed by the
            execution environment (typically ``sys.argv[0]``).

    Returns:
        Absolute path of the project root. The path is not checked for
        existence here; see ``enter_root``.
    """
    script = Path(script_path).absolute()
    return Path(os.path.normpath(script.parent / os.pardir))


def enter_root(root: Path) -> Path:
    """Trace the directory change into ``root`` and validate it.

    Raises:
        ProjectRootError: If ``root`` does not exist or is not a directory.
    """
    logger.info("+ cd %s", root, extra=structured_extra(LogComponent.LAUNCHER, path=root))
    if not root.is_dir():
        raise ProjectRootError(root)
    return root


def run(root: Path, *, build_tool: str = DEFAULT_BUILD_TOOL) -> LaunchResult:
    """Run the documentation build with ``root`` as the working directory.

    Blocks until the build tool exits.

    Raises:
        BuildToolNotFoundError: If ``build_tool`` cannot be found or started.
        DocBuildFailedError: If the build exits with a non-zero status.
    """
    command = DocBuildCommand(build_tool=build_tool)
    argv = command.argv()
    try:
        output: CommandOutput = run_command(argv, cwd=root)
    except FileNotFoundError as exc:
        raise BuildToolNotFoundError(build_tool) from exc
    if output.exit_code != 0:
        raise DocBuildFailedError(output.args, output.exit_code)
    logger.debug(
        "Documentation build finished for %s",
        root,
        extra=structured_extra(
            LogComponent.LAUNCHER,
            tool=build_tool,
            path=root,
            exit_code=output.exit_code,
            duration_ms=output.duration_ms,
        ),
    )
    return LaunchResult(
        root=root,
        command=output.args,
        exit_code=output.exit_code,
        duration_ms=output.duration_ms,
    )


def launch(script_path: str | os.PathLike[str], *, build_tool: str = DEFAULT_BUILD_TOOL) -> LaunchResult:
    """Resolve the project root for ``script_path``, enter it, and build the docs."""
    root = enter_root(resolve_root(script_path))
    return run(root, build_tool=build_tool)
