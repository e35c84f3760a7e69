# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Common exception hierarchy for doclaunch."""

from __future__ import annotations

__all__ = ["DoclaunchError", "DoclaunchValidationError"]


class DoclaunchError(Exception):
    """Base error for all doclaunch exceptions.

    ``exit_code`` is the process status the CLI returns when the error
    reaches it.
    """

    exit_code: int = 1


class DoclaunchValidationError(DoclaunchError, ValueError):
    """Raised when input data fails validation checks."""
