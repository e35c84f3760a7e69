#!/usr/bin/env python3
# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Build the API documentation and open it in a browser.

Runs ``cargo doc --open --no-deps --document-private-items`` from the
directory above ``scripts/``, wherever this script is invoked from.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if SRC.is_dir() and str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from doclaunch.cli import main  # noqa: E402

if __name__ == "__main__":
    raise SystemExit(main(script_path=__file__))
