# topmark:header:start
#
#   project      : DisplayKit
#   file         : uri.py
#   file_relpath : src/displaykit/text/uri.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""URI component encoding."""

from __future__ import annotations

from urllib.parse import quote

# Characters left unescaped: the RFC 3986 unreserved set.
_UNRESERVED: str = "-_.~"


def encode(text: str) -> str:
    """Percent-encode ``text`` for use as a single URI component.

    Behaves like a strict ``encodeURIComponent``: UTF-8 bytes are escaped with
    upper-case hex digits, and only ``A-Z a-z 0-9 - _ . ~`` are kept literal,
    so ``! ' ( ) *`` become ``%21 %27 %28 %29 %2A``.

    Args:
        text (str): Text to encode.

    Returns:
        str: The encoded component.

    Raises:
        ValueError: If ``text`` contains a lone surrogate.
    """
    try:
        data: bytes = text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ValueError(f"Cannot URI-encode text containing a lone surrogate: {e}") from e
    return quote(data, safe=_UNRESERVED)
