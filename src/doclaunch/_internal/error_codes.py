# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

from collections.abc import Mapping
from typing import NewType

from doclaunch._internal.exceptions import DoclaunchError, DoclaunchValidationError

from ..config import ConfigReadError, ConfigValidationError, InvalidConfigFileError, LogSettingsError
from ..launcher import BuildToolNotFoundError, DocBuildFailedError, LaunchError, ProjectRootError

ErrorCode = NewType("ErrorCode", str)

_ERROR_CODES: dict[type[BaseException], ErrorCode] = {
    DoclaunchError: ErrorCode("DL000"),
    DoclaunchValidationError: ErrorCode("DL100"),
    ConfigValidationError: ErrorCode("DL110"),
    ConfigReadError: ErrorCode("DL111"),
    InvalidConfigFileError: ErrorCode("DL112"),
    LogSettingsError: ErrorCode("DL113"),
    LaunchError: ErrorCode("DL200"),
    ProjectRootError: ErrorCode("DL201"),
    BuildToolNotFoundError: ErrorCode("DL202"),
    DocBuildFailedError: ErrorCode("DL203"),
}


def error_code_for(exc: BaseException) -> ErrorCode:
    """Return a stable error code for a structured doclaunch exception."""

    for cls in type(exc).__mro__:
        code = _ERROR_CODES.get(cls)
        if code:
            return code
    return ErrorCode("DL000")


def error_code_catalog() -> Mapping[str, ErrorCode]:
    """Return a stable mapping of fully-qualified exception names to error codes."""

    result: dict[str, ErrorCode] = {}
    for exc_type, code in _ERROR_CODES.items():
        key = f"{exc_type.__module__}.{exc_type.__name__}"
        result[key] = code
    return result


__all__ = ["ErrorCode", "error_code_catalog", "error_code_for"]
