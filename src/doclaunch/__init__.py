# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""doclaunch - build and open a project's API documentation.

Resolves a project root from the launcher script's location and runs
``cargo doc --open --no-deps --document-private-items`` from it.
"""

from __future__ import annotations

from doclaunch._internal.exceptions import DoclaunchError, DoclaunchValidationError

from .config import LauncherSettings, load_config
from .launcher import (
    BuildToolNotFoundError,
    DocBuildCommand,
    DocBuildFailedError,
    LaunchError,
    LaunchResult,
    ProjectRootError,
    enter_root,
    launch,
    resolve_root,
    run,
)

__all__ = [
    "BuildToolNotFoundError",
    "DocBuildCommand",
    "DocBuildFailedError",
    "DoclaunchError",
    "DoclaunchValidationError",
    "LaunchError",
    "LaunchResult",
    "LauncherSettings",
    "ProjectRootError",
    "__version__",
    "enter_root",
    "launch",
    "load_config",
    "resolve_root",
    "run",
]

__version__ = "0.1.0"
