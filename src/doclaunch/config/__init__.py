# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Configuration management for doclaunch.

This package loads optional per-project launcher settings from
``doclaunch.toml`` or ``Cargo.toml`` metadata and validates them.
"""

from __future__ import annotations

from .loader import BUILD_TOOL_ENV, CARGO_MANIFEST, CONFIG_FILENAME, load_config
from .models import (
    ConfigReadError,
    ConfigValidationError,
    InvalidConfigFileError,
    LauncherConfigModel,
    LauncherSettings,
    LogSettingsError,
)

__all__ = [
    "BUILD_TOOL_ENV",
    "CARGO_MANIFEST",
    "CONFIG_FILENAME",
    "ConfigReadError",
    "ConfigValidationError",
    "InvalidConfigFileError",
    "LauncherConfigModel",
    "LauncherSettings",
    "LogSettingsError",
    "load_config",
]
