# topmark:header:start
#
#   project      : DisplayKit
#   file         : test_colors.py
#   file_relpath : tests/rendering/test_colors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for deterministic string colors."""

from __future__ import annotations

import re

from displaykit.rendering.colors import color_swatch, string_hash, string_to_color
from displaykit.text.ansi import strip_ansi_codes
from tests.conftest import parametrize

HEX_COLOR_RE: re.Pattern[str] = re.compile(r"^#[0-9a-f]{6}$")


@parametrize(
    "text, expected",
    [
        ("", "#000000"),
        ("a", "#610000"),
        ("ab", "#210c00"),
        # Hashed over UTF-16 code units (a surrogate pair), not the code point.
        ("😀", "#630d1b"),
        ("hello world", "#c4e2ef"),
        ("alice", "#809689"),
        # Long enough for the hash to wrap around 32 bits many times.
        ("z" * 240, "#8059de"),
    ],
)
def test_string_to_color_known_values(text: str, expected: str) -> None:
    """Known inputs map to the colors the web frontend computes."""
    assert string_to_color(text) == expected


def test_string_hash_small_values() -> None:
    """The rolling hash is ``unit + 31 * hash`` while it stays in 32-bit range."""
    assert string_hash("") == 0
    assert string_hash("a") == 97
    assert string_hash("ab") == 98 + 31 * 97


def test_string_to_color_deterministic_and_well_formed() -> None:
    """Long inputs wrap to 32 bits but still produce a valid lower-case hex color."""
    text = "the quick brown fox jumps over the lazy dog " * 20

    color: str = string_to_color(text)

    assert HEX_COLOR_RE.match(color)
    assert string_to_color(text) == color


def test_color_swatch_plain_when_disabled() -> None:
    """Without color the swatch is just the label."""
    assert color_swatch("alice", enable_color=False) == "alice"
    assert color_swatch("alice", "██", enable_color=False) == "██"


def test_color_swatch_visible_text() -> None:
    """With color the visible text is unchanged (ANSI codes only wrap it)."""
    assert strip_ansi_codes(color_swatch("alice")) == "alice"
    assert strip_ansi_codes(color_swatch("alice", "label")) == "label"
