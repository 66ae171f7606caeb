# topmark:header:start
#
#   project      : DisplayKit
#   file         : __init__.py
#   file_relpath : src/displaykit/text/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Text transformations: casing, ANSI stripping, HTML conversion, URI encoding."""

from __future__ import annotations

from displaykit.text.ansi import contains_ansi_codes, strip_ansi_codes
from displaykit.text.casing import keys_to_camel_case, to_camel_case
from displaykit.text.classnames import class_names
from displaykit.text.html import convert_html_to_markdown
from displaykit.text.uri import encode

__all__ = [
    "class_names",
    "contains_ansi_codes",
    "convert_html_to_markdown",
    "encode",
    "keys_to_camel_case",
    "strip_ansi_codes",
    "to_camel_case",
]
