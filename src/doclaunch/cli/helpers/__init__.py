# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.
"""Shared helper utilities for the doclaunch CLI."""

from __future__ import annotations

from .args import ArgumentRegistrar, register_argument
from .io import echo

__all__ = ["ArgumentRegistrar", "echo", "register_argument"]
