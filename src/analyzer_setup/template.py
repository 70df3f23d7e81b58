from __future__ import annotations

import re
from pathlib import Path
from typing import Mapping

API_KEY_VAR = "GOOGLE_API_KEY"
API_KEY_PLACEHOLDER = "your_gemini_api_key_here"

# First assignment line only; comments are not assignments.
_ASSIGNMENT_RE = re.compile(
    r"^(?P<prefix>[ \t]*(?:export[ \t]+)?)" + API_KEY_VAR + r"=[^\r\n]*(?P<eol>\r?\n)?",
    re.MULTILINE,
)

BUILTIN_TEMPLATE = f"""# =====================================================
# VIDEO ANALYZER - ENVIRONMENT VARIABLES
# =====================================================

# =====================================================
# REQUIRED - For Video Analysis
# =====================================================

# Google Gemini API key (REQUIRED)
# Get your free API key: https://aistudio.google.com/app/apikey
{API_KEY_VAR}={API_KEY_PLACEHOLDER}

# =====================================================
# OPTIONAL - Application Limits
# =====================================================

# Rate limiting (requests per minute)
# RATE_LIMIT_PER_MINUTE=10

# Video upload limits
# MAX_VIDEO_SIZE_MB=100
# MAX_VIDEOS_PER_BATCH=50

# =====================================================
# OPTIONAL - Additional AI Services
# =====================================================
# These are for additional features (chat, transcription, etc.)
# Not required for basic video analysis

# OpenAI API (for chat/transcription features)
# OPENAI_API_KEY=your_openai_api_key_here

# Anthropic API (for chat features)
# ANTHROPIC_API_KEY=your_anthropic_api_key_here

# Deepgram API (for voice transcription)
# DEEPGRAM_API_KEY=your_deepgram_api_key_here

# Replicate API (for image generation)
# REPLICATE_API_TOKEN=your_replicate_api_key_here

# =====================================================
# OPTIONAL - Firebase (for user authentication)
# =====================================================
# NEXT_PUBLIC_FIREBASE_API_KEY=your_firebase_api_key_here
# NEXT_PUBLIC_FIREBASE_AUTH_DOMAIN=your_project_id.firebaseapp.com
# NEXT_PUBLIC_FIREBASE_PROJECT_ID=your_project_id
# NEXT_PUBLIC_FIREBASE_STORAGE_BUCKET=your_project_id.appspot.com
# NEXT_PUBLIC_FIREBASE_MESSAGING_SENDER_ID=123456789012
# NEXT_PUBLIC_FIREBASE_APP_ID=1:123456789012:web:abcdef123456
"""


def resolve_template(example_path: Path) -> str:
    """
    Template text used to seed the local env file.

    A missing example file yields the built-in template. An example file
    that exists but cannot be read counts as "no template" and yields "".
    """
    if not example_path.exists():
        return BUILTIN_TEMPLATE
    try:
        return example_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return ""


def has_api_key_assignment(text: str) -> bool:
    return _ASSIGNMENT_RE.search(text) is not None


def minimal_env(api_key: str, minimal_defaults: Mapping[str, str]) -> str:
    lines = [f"{API_KEY_VAR}={api_key}"]
    lines.extend(f"{name}={value}" for name, value in minimal_defaults.items())
    return "\n".join(lines) + "\n"


def render_env(template: str, api_key: str, minimal_defaults: Mapping[str, str]) -> str:
    """
    Substitute the API key into the template.

    Only the first assignment line is rewritten; the rest of the template
    is kept verbatim. Without any assignment the template is discarded
    in favour of minimal_env().
    """
    if not has_api_key_assignment(template):
        return minimal_env(api_key, minimal_defaults)

    def _replace(m: re.Match[str]) -> str:
        eol = m.group("eol") or "\n"
        return f"{m.group('prefix')}{API_KEY_VAR}={api_key}{eol}"

    return _ASSIGNMENT_RE.sub(_replace, template, count=1)
