# topmark:header:start
#
#   project      : DisplayKit
#   file         : formats.py
#   file_relpath : src/displaykit/cli_shared/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output formats for CLI rendering."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
        DEFAULT: Human-friendly text output; may include ANSI color if enabled.
        JSON: A single JSON document (machine-readable, never colored).
        MARKDOWN: Markdown suitable for pasting into documents or issues.
    """

    DEFAULT = "default"
    JSON = "json"
    MARKDOWN = "markdown"
