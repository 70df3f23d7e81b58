from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

DEFAULT_PROFILE_PATH = Path(__file__).with_name("default_profile.yaml")


@dataclass(frozen=True)
class SetupProfile:
    """
    Operator-facing constants for one setup run.

    env_local / env_example are file names relative to the project root.
    minimal_defaults is an ordered tuple of (name, value) pairs; it becomes
    the tail of the fallback file when a template carries no API key assignment.
    """
    app_name: str = "Video Analyzer"
    env_local: str = ".env.local"
    env_example: str = ".env.example"
    api_key_label: str = "Google Gemini API key"
    rerun_command: str = "npm run setup"
    minimal_defaults: tuple[tuple[str, str], ...] = (
        ("RATE_LIMIT_PER_MINUTE", "10"),
        ("MAX_VIDEO_SIZE_MB", "100"),
    )
    next_steps: tuple[str, ...] = (
        "1) npm install      (install dependencies)",
        "2) npm run dev       (start the server)",
        "3) Open http://localhost:3000/video-analyzer",
    )
    tips: tuple[str, ...] = (
        "\U0001f4a1 Tip: Only the Gemini API key is required. Other services are optional.",
        "\U0001f4d6 See README.md for troubleshooting and additional features.",
    )


def load_setup_profile(path: Optional[str | Path] = None) -> SetupProfile:
    p = Path(path) if path is not None else DEFAULT_PROFILE_PATH
    obj: Any = yaml.safe_load(p.read_text(encoding="utf-8"))
    if obj is None:
        obj = {}
    if not isinstance(obj, dict):
        raise ValueError(f"Setup profile must be a mapping: {p}")

    base = SetupProfile()
    env_local = str(obj.get("env_local", base.env_local)).strip()
    env_example = str(obj.get("env_example", base.env_example)).strip()
    if not env_local or not env_example:
        raise ValueError(f"Setup profile has a blank env file name: {p}")

    defaults_raw = obj.get("minimal_defaults", dict(base.minimal_defaults))
    if not isinstance(defaults_raw, dict):
        raise ValueError(f"minimal_defaults must be a mapping: {p}")

    return SetupProfile(
        app_name=str(obj.get("app_name", base.app_name)).strip(),
        env_local=env_local,
        env_example=env_example,
        api_key_label=str(obj.get("api_key_label", base.api_key_label)).strip(),
        rerun_command=str(obj.get("rerun_command", base.rerun_command)).strip(),
        minimal_defaults=tuple((str(k), str(v)) for k, v in defaults_raw.items()),
        next_steps=_str_list(obj, "next_steps", base.next_steps, p),
        tips=_str_list(obj, "tips", base.tips, p),
    )


def _str_list(obj: dict[str, Any], key: str, default: tuple[str, ...], p: Path) -> tuple[str, ...]:
    raw = obj.get(key, default)
    if raw is None:
        return ()
    if not isinstance(raw, (list, tuple)):
        raise ValueError(f"{key} must be a list: {p}")
    return tuple(str(s) for s in raw)
