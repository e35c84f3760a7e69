# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

from pathlib import Path

import pytest

from doclaunch._internal.utils import consume
from doclaunch.config import (
    ConfigReadError,
    ConfigValidationError,
    InvalidConfigFileError,
    LauncherConfigModel,
    LauncherSettings,
    load_config,
)
from doclaunch.core.model_types import LogFormat


def test_load_config_defaults_without_files(tmp_path: Path) -> None:
    settings = load_config(tmp_path)
    assert settings == LauncherSettings()
    assert settings.build_tool == "cargo"
    assert settings.source is None


def test_load_config_from_dedicated_file(tmp_path: Path) -> None:
    config_path = tmp_path / "doclaunch.toml"
    consume(
        config_path.write_text(
            """
build_tool = "  cargo-nightly  "
log_format = "JSON"
log_level = "debug"
""",
            encoding="utf-8",
        ),
    )
    settings = load_config(tmp_path)
    assert settings.build_tool == "cargo-nightly"
    assert settings.log_format is LogFormat.JSON
    assert settings.log_level == "debug"
    assert settings.source == config_path


def test_load_config_from_cargo_metadata(tmp_path: Path) -> None:
    manifest = tmp_path / "Cargo.toml"
    consume(
        manifest.write_text(
            """
[package]
name = "walpurgis"
version = "0.1.0"

[package.metadata.doclaunch]
build_tool = "/opt/rust/bin/cargo"
""",
            encoding="utf-8",
        ),
    )
    settings = load_config(tmp_path)
    assert settings.build_tool == "/opt/rust/bin/cargo"
    assert settings.log_format is None
    assert settings.source == manifest


def test_cargo_manifest_without_metadata_uses_defaults(tmp_path: Path) -> None:
    consume((tmp_path / "Cargo.toml").write_text('[package]\nname = "walpurgis"\n', encoding="utf-8"))
    settings = load_config(tmp_path)
    assert settings == LauncherSettings()


def test_dedicated_file_wins_over_cargo_metadata(tmp_path: Path) -> None:
    consume((tmp_path / "doclaunch.toml").write_text('build_tool = "from-dedicated"\n', encoding="utf-8"))
    consume(
        (tmp_path / "Cargo.toml").write_text(
            '[package.metadata.doclaunch]\nbuild_tool = "from-cargo"\n',
            encoding="utf-8",
        ),
    )
    assert load_config(tmp_path).build_tool == "from-dedicated"


def test_env_override_beats_files(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    consume((tmp_path / "doclaunch.toml").write_text('build_tool = "from-file"\n', encoding="utf-8"))
    monkeypatch.setenv("DOCLAUNCH_BUILD_TOOL", "from-env")
    assert load_config(tmp_path).build_tool == "from-env"


def test_blank_env_override_is_ignored(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DOCLAUNCH_BUILD_TOOL", "   ")
    assert load_config(tmp_path).build_tool == "cargo"


def test_invalid_toml_raises_typed_error(tmp_path: Path) -> None:
    config_path = tmp_path / "doclaunch.toml"
    consume(config_path.write_text("build_tool = [unterminated\n", encoding="utf-8"))
    with pytest.raises(InvalidConfigFileError) as excinfo:
        _ = load_config(tmp_path)
    assert excinfo.value.path == config_path
    assert isinstance(excinfo.value, ConfigValidationError)
    assert isinstance(excinfo.value, ValueError)


@pytest.mark.parametrize(
    "body",
    [
        'build_tool = ""\n',
        "build_tool = 3\n",
        'log_format = "yaml"\n',
        'log_level = "verbose"\n',
        'open = false\n',
    ],
)
def test_schema_violations_raise_typed_error(tmp_path: Path, body: str) -> None:
    consume((tmp_path / "doclaunch.toml").write_text(body, encoding="utf-8"))
    with pytest.raises(InvalidConfigFileError):
        _ = load_config(tmp_path)


def test_unreadable_file_raises_read_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_path = tmp_path / "doclaunch.toml"
    consume(config_path.write_text('build_tool = "cargo"\n', encoding="utf-8"))

    def _deny(self: Path, *args: object, **kwargs: object) -> str:
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "read_text", _deny)
    with pytest.raises(ConfigReadError) as excinfo:
        _ = load_config(tmp_path)
    assert isinstance(excinfo.value.error, PermissionError)


def test_config_model_forbids_flag_overrides() -> None:
    with pytest.raises(ValueError):
        _ = LauncherConfigModel.model_validate({"no_deps": False})
