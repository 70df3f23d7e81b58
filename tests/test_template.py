from __future__ import annotations

from pathlib import Path

from analyzer_setup.template import (
    API_KEY_PLACEHOLDER,
    BUILTIN_TEMPLATE,
    has_api_key_assignment,
    minimal_env,
    render_env,
    resolve_template,
)

DEFAULTS = {"RATE_LIMIT_PER_MINUTE": "10", "MAX_VIDEO_SIZE_MB": "100"}


def test_missing_example_uses_builtin_template(tmp_path: Path):
    assert resolve_template(tmp_path / ".env.example") == BUILTIN_TEMPLATE


def test_existing_example_is_read_verbatim(tmp_path: Path):
    p = tmp_path / ".env.example"
    p.write_text("GOOGLE_API_KEY=placeholder\nFOO=bar\n", encoding="utf-8")
    assert resolve_template(p) == "GOOGLE_API_KEY=placeholder\nFOO=bar\n"


def test_unreadable_example_degrades_to_empty(tmp_path: Path):
    p = tmp_path / ".env.example"
    p.mkdir()
    assert resolve_template(p) == ""

    q = tmp_path / "binary.example"
    q.write_bytes(b"\xff\xfe\xfa GOOGLE_API_KEY=x\n")
    assert resolve_template(q) == ""


def test_builtin_template_documents_optional_settings():
    assert f"GOOGLE_API_KEY={API_KEY_PLACEHOLDER}\n" in BUILTIN_TEMPLATE
    for name in ("RATE_LIMIT_PER_MINUTE", "MAX_VIDEO_SIZE_MB", "MAX_VIDEOS_PER_BATCH", "OPENAI_API_KEY"):
        assert f"# {name}=" in BUILTIN_TEMPLATE


def test_render_replaces_only_the_key_line():
    out = render_env("GOOGLE_API_KEY=placeholder\nFOO=bar\n", "xyz", DEFAULTS)
    assert out == "GOOGLE_API_KEY=xyz\nFOO=bar\n"


def test_render_builtin_template():
    out = render_env(BUILTIN_TEMPLATE, "abc123", DEFAULTS)
    assert "GOOGLE_API_KEY=abc123\n" in out
    assert API_KEY_PLACEHOLDER not in out
    assert "# OPENAI_API_KEY=your_openai_api_key_here" in out


def test_render_first_match_only():
    out = render_env("GOOGLE_API_KEY=a\nX=1\nGOOGLE_API_KEY=b\n", "k", DEFAULTS)
    assert out == "GOOGLE_API_KEY=k\nX=1\nGOOGLE_API_KEY=b\n"


def test_render_keeps_crlf_and_export_prefix():
    out = render_env("A=1\r\nexport GOOGLE_API_KEY=old\r\nB=2\r\n", "new", DEFAULTS)
    assert out == "A=1\r\nexport GOOGLE_API_KEY=new\r\nB=2\r\n"


def test_render_key_on_last_line_without_newline():
    assert render_env("A=1\nGOOGLE_API_KEY=old", "new", DEFAULTS) == "A=1\nGOOGLE_API_KEY=new\n"


def test_render_inserts_key_literally():
    out = render_env("GOOGLE_API_KEY=old\n", r"a\1b$&\g<0>", DEFAULTS)
    assert out == "GOOGLE_API_KEY=a\\1b$&\\g<0>\n"


def test_commented_key_is_not_an_assignment():
    text = "# GOOGLE_API_KEY=your_key\nFOO=bar\n"
    assert not has_api_key_assignment(text)
    assert render_env(text, "zzz", DEFAULTS) == minimal_env("zzz", DEFAULTS)


def test_missing_assignment_falls_back_to_minimal_form():
    out = render_env("FOO=bar\n", "zzz", DEFAULTS)
    assert out == "GOOGLE_API_KEY=zzz\nRATE_LIMIT_PER_MINUTE=10\nMAX_VIDEO_SIZE_MB=100\n"
    assert render_env("", "zzz", DEFAULTS) == out
