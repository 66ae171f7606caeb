# topmark:header:start
#
#   project      : DisplayKit
#   file         : colors.py
#   file_relpath : src/displaykit/rendering/colors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Deterministic colors derived from strings.

Used to give users, apps or tags a stable color without storing one. The hash
reproduces the classic JavaScript ``hash = c + ((hash << 5) - hash)`` loop,
including its 32-bit shift semantics and UTF-16 code units, so the same input
yields the same color as the web frontend.
"""

from __future__ import annotations

from yachalk import chalk

from displaykit.config.logging import get_logger

logger = get_logger(__name__)


def _to_int32(n: int) -> int:
    n &= 0xFFFFFFFF
    return n - 0x100000000 if n >= 0x80000000 else n


def _utf16_code_units(text: str) -> list[int]:
    data: bytes = text.encode("utf-16-le", errors="surrogatepass")
    return [int.from_bytes(data[i : i + 2], "little") for i in range(0, len(data), 2)]


def string_hash(text: str) -> int:
    """Return the JavaScript-compatible rolling hash of ``text``.

    The shift operates on the 32-bit truncation of the running hash while the
    subtraction uses the untruncated value, as in JavaScript.
    """
    h = 0
    for unit in _utf16_code_units(text):
        h = unit + (_to_int32(_to_int32(h) << 5) - h)
    return h


def string_to_color(text: str) -> str:
    """Map ``text`` to a deterministic ``#rrggbb`` color.

    Channel ``i`` is ``(int32(hash) >> 8*i) & 0xff`` for red, green and blue
    respectively. The empty string maps to ``#000000``.

    Args:
        text (str): Any string.

    Returns:
        str: A lower-case hex color such as ``"#a1b2c3"``.
    """
    h32: int = _to_int32(string_hash(text))
    color = "#" + "".join(f"{(h32 >> (i * 8)) & 0xFF:02x}" for i in range(3))
    logger.trace("string_to_color(%r) -> %s", text, color)
    return color


def color_swatch(text: str, label: str | None = None, *, enable_color: bool = True) -> str:
    """Render ``label`` (default: ``text``) in the color hashed from ``text``.

    The result carries a truecolor ANSI foreground when ``enable_color`` is set
    and yachalk detects color support; it is plain text otherwise.
    """
    shown: str = text if label is None else label
    if not enable_color:
        return shown
    return chalk.hex(string_to_color(text))(shown)
