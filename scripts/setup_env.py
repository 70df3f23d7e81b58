#!/usr/bin/env python3
"""
Interactive helper to create .env.local with GOOGLE_API_KEY.

- Seeds the file from .env.example when present, else a built-in template
- Asks before overwriting an existing .env.local
- Sets file permissions to 600

Usage:
  python3 scripts/setup_env.py
  .venv/bin/python scripts/setup_env.py
"""
from __future__ import annotations

from pathlib import Path

from analyzer_setup.cli import main

ROOT = Path(__file__).resolve().parent.parent


if __name__ == "__main__":
    raise SystemExit(main(["--root", str(ROOT)]))
