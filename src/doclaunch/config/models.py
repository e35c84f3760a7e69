# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Configuration models and validation for doclaunch.

The pydantic model validates the raw TOML table; the dataclass is what the
rest of the package consumes at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, field_validator

from doclaunch._internal.exceptions import DoclaunchValidationError
from doclaunch.core.model_types import LogFormat
from doclaunch.launcher import DEFAULT_BUILD_TOOL

if TYPE_CHECKING:
    from pathlib import Path

type LogLevelName = Literal["debug", "info", "warning", "error"]


class ConfigValidationError(DoclaunchValidationError):
    """Raised when configuration data contains invalid values."""


class ConfigReadError(ConfigValidationError):
    """Raised when a configuration file cannot be read from disk."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with file path and underlying error.

        Args:
            path: The path to the configuration file that could not be read.
            error: The underlying exception that caused the read failure.
        """
        self.path = path
        self.error = error
        super().__init__(f"Unable to read {path}: {error}")


class InvalidConfigFileError(ConfigValidationError):
    """Raised when a configuration file fails parsing or validation."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with configuration file path and validation error.

        Args:
            path: The path to the configuration file that failed validation.
            error: The underlying parse or validation exception.
        """
        self.path = path
        self.error = error
        super().__init__(f"Invalid doclaunch configuration in {path}: {error}")


class LogSettingsError(ConfigValidationError):
    """Raised when a logging environment variable holds an unsupported value."""

    def __init__(self, variable: str, value: str) -> None:
        self.variable = variable
        self.value = value
        super().__init__(f"Unsupported value for {variable}: {value!r}")


@dataclass(slots=True)
class LauncherSettings:
    """Runtime settings for a launch.

    Attributes:
        build_tool: Executable that provides the ``doc`` subcommand.
        log_format: Log format requested by the project, if any.
        log_level: Log level requested by the project, if any.
        source: File the settings were read from, ``None`` for defaults.
    """

    build_tool: str = DEFAULT_BUILD_TOOL
    log_format: LogFormat | None = None
    log_level: LogLevelName | None = None
    source: Path | None = None


class LauncherConfigModel(BaseModel):
    """Pydantic model for the ``doclaunch`` configuration table."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")
    build_tool: str = DEFAULT_BUILD_TOOL
    log_format: LogFormat | None = None
    log_level: LogLevelName | None = None

    @field_validator("build_tool", mode="before")
    @classmethod
    def _strip_build_tool(cls, value: object) -> str:
        if not isinstance(value, str):
            msg = "build_tool must be a string"
            raise ValueError(msg)  # noqa: TRY004 - pydantic converts ValueError into ValidationError
        stripped = value.strip()
        if not stripped:
            msg = "build_tool must not be empty"
            raise ValueError(msg)
        return stripped

    @field_validator("log_format", "log_level", mode="before")
    @classmethod
    def _lower(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value


def settings_from_model(model: LauncherConfigModel, *, source: Path | None = None) -> LauncherSettings:
    return LauncherSettings(
        build_tool=model.build_tool,
        log_format=model.log_format,
        log_level=model.log_level,
        source=source,
    )


__all__ = [
    "ConfigReadError",
    "ConfigValidationError",
    "InvalidConfigFileError",
    "LauncherConfigModel",
    "LauncherSettings",
    "LogLevelName",
    "settings_from_model",
]
