# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.
"""Argument parser helpers used by the CLI."""

from __future__ import annotations

import argparse
from typing import Any, Protocol

from doclaunch._internal.utils import consume


class ArgumentRegistrar(Protocol):
    def add_argument(
        self, *args: Any, **kwargs: Any
    ) -> argparse.Action: ...  # pragma: no cover - stub


def register_argument(
    registrar: ArgumentRegistrar,
    *args: Any,
    **kwargs: Any,
) -> None:
    """Register an argument on a parser/argument group, discarding the action handle."""
    consume(registrar.add_argument(*args, **kwargs))


__all__ = ["ArgumentRegistrar", "register_argument"]
