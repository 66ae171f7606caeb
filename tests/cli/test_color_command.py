# topmark:header:start
#
#   project      : DisplayKit
#   file         : test_color_command.py
#   file_relpath : tests/cli/test_color_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI: ``color`` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from displaykit.text.ansi import strip_ansi_codes
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from click.testing import Result


@mark_cli
def test_color_single() -> None:
    result: Result = run_cli(["color", "a"])

    assert_SUCCESS(result)
    assert result.stdout == "#610000\n"


@mark_cli
def test_color_multiple() -> None:
    result: Result = run_cli(["color", "a", "ab"])

    assert_SUCCESS(result)
    assert result.stdout == "#610000  a\n#210c00  ab\n"


@mark_cli
def test_color_json() -> None:
    result: Result = run_cli(["color", "--format", "json", "a", ""])

    assert_SUCCESS(result)
    assert json.loads(result.stdout) == [
        {"text": "a", "color": "#610000"},
        {"text": "", "color": "#000000"},
    ]


@mark_cli
def test_color_markdown() -> None:
    result: Result = run_cli(["color", "--format", "markdown", "a"])

    assert_SUCCESS(result)
    assert "| a    | `#610000` |" in result.stdout


@mark_cli
def test_color_markdown_escapes_pipes() -> None:
    result: Result = run_cli(["color", "--format", "markdown", "a|b"])

    assert_SUCCESS(result)
    assert "| a\\|b | `#877b01` |" in result.stdout


@mark_cli
def test_color_swatch_without_color() -> None:
    result: Result = run_cli(["--no-color", "color", "--swatch", "a"])

    assert_SUCCESS(result)
    assert result.stdout == "██ #610000  a\n"


@mark_cli
def test_color_swatch_forced_color_has_same_visible_text() -> None:
    result: Result = run_cli(["--color", "always", "color", "--swatch", "a"])

    assert_SUCCESS(result)
    assert strip_ansi_codes(result.stdout) == "██ #610000  a\n"


@mark_cli
def test_color_requires_text() -> None:
    result: Result = run_cli(["color"])

    assert result.exit_code == 2
