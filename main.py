#!/usr/bin/env python3
# /matchclip/main.py
"""
matchclip Main Entry Point
==========================

Launcher for running matchclip from a source checkout without installing it:
1) Path Setup: ensures the matchclip package under src/ is importable.
2) CLI: hands argv over to `matchclip.cli.main`, which loads configuration,
   initializes logging and performs the truncation.
"""

from __future__ import annotations

import os
import sys


project_root = os.path.join(os.path.dirname(os.path.abspath(__file__)), "src")
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from matchclip.cli import main  # noqa: E402


if __name__ == "__main__":
    sys.exit(main())
