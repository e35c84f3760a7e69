"""Public exception types re-exported from the internal package."""

from __future__ import annotations

from doclaunch._internal.exceptions import DoclaunchError, DoclaunchValidationError
from doclaunch.config import ConfigReadError, ConfigValidationError, InvalidConfigFileError, LogSettingsError
from doclaunch.launcher import BuildToolNotFoundError, DocBuildFailedError, LaunchError, ProjectRootError

__all__ = [
    "BuildToolNotFoundError",
    "ConfigReadError",
    "ConfigValidationError",
    "DocBuildFailedError",
    "DoclaunchError",
    "DoclaunchValidationError",
    "InvalidConfigFileError",
    "LaunchError",
    "LogSettingsError",
    "ProjectRootError",
]
