# topmark:header:start
#
#   project      : DisplayKit
#   file         : html.py
#   file_relpath : src/displaykit/text/html.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HTML to Markdown-ish text conversion.

This is a lightweight, regex-based conversion meant for short HTML snippets
(e.g. clipboard or OCR-adjacent content) rather than full documents: images
become Markdown image links and every other tag is dropped.
"""

from __future__ import annotations

import re
from typing import Final

from displaykit.config.logging import get_logger

logger = get_logger(__name__)

# <img ... src="X" [... alt="Y"] [/]>; alt is only recognized after src and the
# tag must end right after the last recognized attribute.
_RE_IMG: Final[re.Pattern[str]] = re.compile(
    r'<img\s+(?:[^>]*?\s+)?src="([^"]*)"(?:\s+(?:[^>]*?\s+)?alt="([^"]*)")?\s*/?>'
)
_RE_TAG: Final[re.Pattern[str]] = re.compile(r"<[^>]*>")


def _img_to_markdown(m: re.Match[str]) -> str:
    src: str = m.group(1)
    alt: str = m.group(2) or ""
    return f"![{alt}]({src})"


def convert_html_to_markdown(html: str) -> str:
    """Convert an HTML snippet to plain text with Markdown images.

    Steps:
        1. ``<img src="X" alt="Y">`` becomes ``![Y](X)`` (``![](X)`` without alt).
           Attribute values must be double-quoted.
        2. Every remaining ``<...>`` tag is removed.

    Text content is otherwise untouched; HTML entities are not decoded.

    Args:
        html (str): The HTML snippet.

    Returns:
        str: The converted text.
    """
    converted, n_images = _RE_IMG.subn(_img_to_markdown, html)
    text, n_tags = _RE_TAG.subn("", converted)
    logger.trace("html->markdown: %d image(s), %d tag(s) removed", n_images, n_tags)
    return text
