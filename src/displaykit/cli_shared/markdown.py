# topmark:header:start
#
#   project      : DisplayKit
#   file         : markdown.py
#   file_relpath : src/displaykit/cli_shared/markdown.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markdown rendering helpers for CLI output."""

from __future__ import annotations

from typing import TYPE_CHECKING

from displaykit.text.ansi import strip_ansi_codes

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


def _visible_len(text: str) -> int:
    return len(strip_ansi_codes(text))


def escape_markdown_cell(text: str) -> str:
    """Escape pipe characters so ``text`` stays inside one table cell."""
    return text.replace("|", r"\|")


def render_markdown_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    *,
    align: Mapping[int, str] | None = None,
) -> str:
    """Render a GitHub-flavoured Markdown table with padded columns.

    Args:
        headers: Column headers.
        rows: A sequence of row sequences (each row same length as ``headers``).
        align: Optional mapping of column index to alignment:
            ``"left"`` (default), ``"right"``, or ``"center"``.

    Returns:
        The Markdown table as a single string (ending with a newline).

    Raises:
        ValueError: If any row length differs from the number of headers.

    Notes:
        Column widths use the visible length of each cell, ignoring ANSI
        sequences, so styled cells still line up. Pipes in cells are escaped
        with a backslash before widths are measured.
    """
    if not headers:
        return ""
    ncols: int = len(headers)
    for r in rows:
        if len(r) != ncols:
            raise ValueError("All rows must have the same number of columns as headers")

    header_cells: list[str] = [escape_markdown_cell(str(h)) for h in headers]
    body: list[list[str]] = [[escape_markdown_cell(str(c)) for c in r] for r in rows]

    widths: list[int] = [max(3, _visible_len(h)) for h in header_cells]
    for r in body:
        for i, cell in enumerate(r):
            widths[i] = max(widths[i], _visible_len(cell))

    def _pad(text: str, i: int) -> str:
        fill: str = " " * (widths[i] - _visible_len(text))
        if (align or {}).get(i, "left").lower() == "right":
            return fill + text
        return text + fill

    def _sep_for(i: int) -> str:
        style: str = (align or {}).get(i, "left").lower()
        w: int = widths[i]
        if style == "right":
            return "-" * (w - 1) + ":"
        if style == "center":
            return ":" + "-" * (w - 2) + ":"
        return "-" * w

    def _line(cells: Sequence[str]) -> str:
        return "| " + " | ".join(_pad(c, i) for i, c in enumerate(cells)) + " |"

    lines: list[str] = [
        _line(header_cells),
        "| " + " | ".join(_sep_for(i) for i in range(ncols)) + " |",
        *(_line(r) for r in body),
    ]
    return "\n".join(lines) + "\n"
