# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Configuration loading for doclaunch.

Settings are looked up in the project root: a dedicated ``doclaunch.toml``
first, then the ``[package.metadata.doclaunch]`` table of ``Cargo.toml``.
The ``DOCLAUNCH_BUILD_TOOL`` environment variable overrides the build tool
from either source.
"""

from __future__ import annotations

import logging
import os
import tomllib as toml
from typing import TYPE_CHECKING, Final, cast

from pydantic import ValidationError

from doclaunch.core.model_types import LogComponent
from doclaunch.logging import structured_extra

from .models import (
    ConfigReadError,
    InvalidConfigFileError,
    LauncherConfigModel,
    LauncherSettings,
    settings_from_model,
)

if TYPE_CHECKING:
    from pathlib import Path

logger: logging.Logger = logging.getLogger("doclaunch.config")

CONFIG_FILENAME: Final[str] = "doclaunch.toml"
CARGO_MANIFEST: Final[str] = "Cargo.toml"
BUILD_TOOL_ENV: Final[str] = "DOCLAUNCH_BUILD_TOOL"


def _read_toml(path: Path) -> dict[str, object]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigReadError(path, exc) from exc
    try:
        return toml.loads(text)
    except toml.TOMLDecodeError as exc:
        raise InvalidConfigFileError(path, exc) from exc


def _cargo_metadata_table(raw: dict[str, object]) -> dict[str, object] | None:
    table: object = raw
    for key in ("package", "metadata", "doclaunch"):
        if not isinstance(table, dict):
            return None
        table = cast("dict[str, object]", table).get(key)
    if not isinstance(table, dict):
        return None
    return cast("dict[str, object]", table)


def _find_raw_config(root: Path) -> tuple[Path, dict[str, object]] | None:
    dedicated = root / CONFIG_FILENAME
    if dedicated.is_file():
        return dedicated, _read_toml(dedicated)
    manifest = root / CARGO_MANIFEST
    if manifest.is_file():
        table = _cargo_metadata_table(_read_toml(manifest))
        if table is not None:
            return manifest, table
    return None


def _apply_env_overrides(settings: LauncherSettings) -> LauncherSettings:
    override = os.getenv(BUILD_TOOL_ENV, "").strip()
    if override:
        settings.build_tool = override
    return settings


def load_config(root: Path) -> LauncherSettings:
    """Load launcher settings for ``root``.

    Args:
        root: Project root that holds ``doclaunch.toml`` or ``Cargo.toml``.

    Returns:
        Validated settings, with environment overrides applied. Defaults are
        returned when neither file provides a configuration table.

    Raises:
        ConfigReadError: If a configuration file exists but cannot be read.
        InvalidConfigFileError: If a configuration file is not valid TOML or
            its table fails validation.
    """
    found = _find_raw_config(root)
    if found is None:
        logger.debug(
            "No doclaunch configuration in %s; using defaults",
            root,
            extra=structured_extra(LogComponent.CONFIG, path=root),
        )
        return _apply_env_overrides(LauncherSettings())
    path, raw = found
    try:
        model = LauncherConfigModel.model_validate(raw)
    except ValidationError as exc:
        raise InvalidConfigFileError(path, exc) from exc
    logger.debug(
        "Loaded doclaunch configuration from %s",
        path,
        extra=structured_extra(LogComponent.CONFIG, path=path, tool=model.build_tool),
    )
    return _apply_env_overrides(settings_from_model(model, source=path))


__all__ = ["BUILD_TOOL_ENV", "CARGO_MANIFEST", "CONFIG_FILENAME", "load_config"]
