# topmark:header:start
#
#   project      : DisplayKit
#   file         : test_markdown_table.py
#   file_relpath : tests/cli/test_markdown_table.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the Markdown table renderer used by ``--format markdown``."""

from __future__ import annotations

import pytest

from displaykit.cli_shared.markdown import render_markdown_table


def test_table_padding_and_alignment() -> None:
    table: str = render_markdown_table(
        ["Path", "Size"], [["a", "10"], ["long-name", "2048"]], align={1: "right"}
    )

    assert table.splitlines() == [
        "| Path      | Size |",
        "| --------- | ---: |",
        "| a         |   10 |",
        "| long-name | 2048 |",
    ]


def test_table_ignores_ansi_width() -> None:
    table: str = render_markdown_table(["C"], [["\x1b[31mab\x1b[0m"]])

    assert table.splitlines()[2] == "| \x1b[31mab\x1b[0m  |"


def test_table_row_length_mismatch() -> None:
    with pytest.raises(ValueError, match="same number of columns"):
        render_markdown_table(["a", "b"], [["only-one"]])


def test_empty_headers() -> None:
    assert render_markdown_table([], []) == ""


def test_table_escapes_pipes_in_cells() -> None:
    table: str = render_markdown_table(["A|B", "C"], [["x|y", "z"]])

    assert table.splitlines() == [
        "| A\\|B | C   |",
        "| ---- | --- |",
        "| x\\|y | z   |",
    ]
