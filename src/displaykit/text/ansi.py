# topmark:header:start
#
#   project      : DisplayKit
#   file         : ansi.py
#   file_relpath : src/displaykit/text/ansi.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ANSI escape-sequence helpers."""

from __future__ import annotations

import re
from typing import Final

# CSI sequences for erase (J, K), SGR (m) and cursor save/restore (s, u).
_RE_ANSI_ESCAPE: Final[re.Pattern[str]] = re.compile(r"\x1b\[[0-9;]*[JKmsu]")


def strip_ansi_codes(text: str) -> str:
    """Remove ANSI color/erase/cursor-save sequences from ``text``.

    Only ``ESC [ <digits/semicolons> <J|K|m|s|u>`` is removed; other escape
    sequences are preserved. Removal is repeated until nothing matches, so a
    sequence spliced together by an earlier removal is removed too and the
    result is idempotent.
    """
    while True:
        stripped: str = _RE_ANSI_ESCAPE.sub("", text)
        if stripped == text:
            return stripped
        text = stripped


def contains_ansi_codes(text: str) -> bool:
    """Return True if ``text`` contains a sequence `strip_ansi_codes` would remove."""
    return _RE_ANSI_ESCAPE.search(text) is not None
