# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Core enumerations shared across doclaunch layers."""

from __future__ import annotations

from . import model_types

__all__ = ["model_types"]
