# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Shared Hypothesis strategies for property-based tests."""

from __future__ import annotations

from hypothesis import strategies as st

__all__ = ["path_segments"]


def path_segments(min_size: int = 1, max_size: int = 5) -> st.SearchStrategy[list[str]]:
    """Return a strategy that yields lists of plain POSIX path segments."""
    segment = st.from_regex(r"[a-zA-Z0-9_-]{1,12}", fullmatch=True)
    return st.lists(segment, min_size=min_size, max_size=max_size)
