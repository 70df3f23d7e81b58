from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values

from analyzer_setup.console import Console
from analyzer_setup.profile import SetupProfile, load_setup_profile
from analyzer_setup.template import API_KEY_VAR, render_env, resolve_template


class SetupStatus(str, Enum):
    CREATED = "created"
    KEPT_EXISTING = "kept_existing"
    MISSING_KEY = "missing_key"
    WRITE_FAILED = "write_failed"


@dataclass(frozen=True)
class SetupOutcome:
    status: SetupStatus
    path: Path
    reason: str
    warnings: tuple[str, ...] = ()

    @property
    def exit_code(self) -> int:
        if self.status in (SetupStatus.CREATED, SetupStatus.KEPT_EXISTING):
            return 0
        return 1


def write_env_file(path: Path, text: str) -> None:
    # Encode before opening so an unencodable key never truncates the target.
    # Bytes are written as-is, keeping the template's own line endings.
    data = text.encode("utf-8")
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "wb") as f:
        f.write(data)
    # O_CREAT mode only applies to new files.
    os.chmod(path, 0o600)


def check_written_key(path: Path, api_key: str) -> list[str]:
    """
    Re-read the written file the way the application will load it.

    A later duplicate assignment, or a value dotenv parses differently
    (quotes, inline " #"), means the application will not see the key
    that was entered.
    """
    values = dotenv_values(path)
    if values.get(API_KEY_VAR) == api_key:
        return []
    return [
        f"Warning: {path.name} resolves {API_KEY_VAR} to a different value than the one entered. "
        "Check it for duplicate assignments or special characters."
    ]


def run_setup(
    root: Path,
    console: Optional[Console] = None,
    profile: Optional[SetupProfile] = None,
) -> SetupOutcome:
    """
    Create or overwrite <root>/.env.local with the operator's API key.

    Linear procedure: overwrite check, key prompt, template resolution,
    substitution, write. Both failure kinds (empty key, write error) are
    reported on the console's error stream and returned as an outcome.
    """
    console = console or Console()
    profile = profile or load_setup_profile()

    root = Path(root).expanduser().resolve()
    local_path = root / profile.env_local
    example_path = root / profile.env_example

    console.info(f"\n{profile.app_name} – setup")
    console.info(f"This will create a {profile.env_local} file with your API key.")

    if local_path.exists():
        console.info(f"\nA {profile.env_local} already exists.")
        answer = console.ask("Overwrite it? (y/N): ").strip().lower()
        if answer != "y":
            console.info(f"Keeping existing {profile.env_local}.")
            return SetupOutcome(
                status=SetupStatus.KEPT_EXISTING,
                path=local_path,
                reason="Operator declined overwrite.",
            )

    console.info()
    api_key = console.ask(f"Enter your {profile.api_key_label}: ").strip()
    if not api_key:
        console.error(f"No API key provided. You can rerun `{profile.rerun_command}` later.")
        return SetupOutcome(
            status=SetupStatus.MISSING_KEY,
            path=local_path,
            reason="No API key provided.",
        )

    template = resolve_template(example_path)
    output = render_env(template, api_key, dict(profile.minimal_defaults))

    try:
        write_env_file(local_path, output)
    except (OSError, UnicodeError) as e:
        console.error(f"Failed to write {profile.env_local}: {e}")
        return SetupOutcome(
            status=SetupStatus.WRITE_FAILED,
            path=local_path,
            reason=str(e),
        )

    console.info(f"\nCreated {local_path}")

    warnings = check_written_key(local_path, api_key)
    for w in warnings:
        console.error(w)

    console.info("\n✅ Setup complete! Next steps:")
    for step in profile.next_steps:
        console.info(f"  {step}")
    if profile.tips:
        console.info()
        for tip in profile.tips:
            console.info(tip)

    return SetupOutcome(
        status=SetupStatus.CREATED,
        path=local_path,
        reason=f"Wrote {API_KEY_VAR} to {profile.env_local}.",
        warnings=tuple(warnings),
    )
