"""Public accessors for doclaunch error code metadata."""

from __future__ import annotations

from doclaunch._internal.error_codes import ErrorCode, error_code_catalog, error_code_for

__all__ = ["ErrorCode", "error_code_catalog", "error_code_for"]
