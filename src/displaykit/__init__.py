# topmark:header:start
#
#   project      : DisplayKit
#   file         : __init__.py
#   file_relpath : src/displaykit/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DisplayKit package.

DisplayKit bundles the small text and display helpers a desktop frontend needs:
identifier casing, ANSI stripping, HTML-to-Markdown conversion, deterministic
string colors, keyboard-shortcut labels, per-platform CLI paths, nested-object
flattening and async file sizes. The helpers are importable on their own and
exposed through the ``displaykit`` CLI.
"""

from __future__ import annotations
