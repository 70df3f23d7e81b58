from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Optional, Sequence

import yaml

from analyzer_setup.console import Console
from analyzer_setup.initializer import run_setup
from analyzer_setup.profile import load_setup_profile


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="analyzer-setup",
        description="Create .env.local with your Google Gemini API key.",
    )
    ap.add_argument("--root", default=os.environ.get("ANALYZER_SETUP_ROOT") or ".")
    ap.add_argument("--profile", default=os.environ.get("ANALYZER_SETUP_PROFILE"))
    args = ap.parse_args(argv)

    console = console or Console()
    try:
        profile = load_setup_profile(args.profile)
    except (OSError, ValueError, yaml.YAMLError) as e:
        console.error(f"Could not load setup profile: {e}")
        return 2

    outcome = run_setup(Path(args.root), console=console, profile=profile)
    return outcome.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
