# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Structured utility helpers used across doclaunch internals."""

from __future__ import annotations

from .common import consume
from .process import CommandOutput, format_command, run_command

__all__ = [
    "CommandOutput",
    "consume",
    "format_command",
    "run_command",
]
