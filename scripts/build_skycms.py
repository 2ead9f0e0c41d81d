#!/usr/bin/env python3
"""Build the SkyCMS Tailwind distribution from the repository root."""

from __future__ import annotations

import sys
from pathlib import Path


ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from src.cli import cli  # noqa: E402


if __name__ == "__main__":
    cli(args=["build", "--root", str(ROOT)], prog_name="build_skycms")
