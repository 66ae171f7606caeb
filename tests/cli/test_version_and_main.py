# topmark:header:start
#
#   project      : DisplayKit
#   file         : test_version_and_main.py
#   file_relpath : tests/cli/test_version_and_main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI: ``version`` command and group-level options."""

from __future__ import annotations

import json
import logging
import sys
from importlib.metadata import version
from typing import TYPE_CHECKING

import pytest

from displaykit.config.logging import TRACE_LEVEL, setup_logging
from displaykit.constants import DISPLAYKIT_VERSION
from displaykit.text.ansi import strip_ansi_codes
from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from click.testing import Result

# Before Click 8.2, CliRunner folds stderr into stdout.
CLICK_SEPARATES_STDERR: bool = tuple(int(p) for p in version("click").split(".")[:2]) >= (8, 2)


@mark_cli
def test_version_default() -> None:
    result: Result = run_cli(["version"])

    assert_SUCCESS(result)
    assert result.stdout == f"{DISPLAYKIT_VERSION}\n"


@mark_cli
def test_version_json() -> None:
    result: Result = run_cli(["version", "--format", "json"])

    assert_SUCCESS(result)
    assert json.loads(result.stdout) == {"version": DISPLAYKIT_VERSION}


@mark_cli
def test_no_subcommand_prints_help() -> None:
    result: Result = run_cli([])

    assert_SUCCESS(result)
    assert "Usage:" in result.stdout
    assert "shortcut" in result.stdout


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    result: Result = run_cli(["-v", "-q", "version"])

    assert_USAGE_ERROR(result)


@mark_cli
def test_invalid_color_choice() -> None:
    result: Result = run_cli(["--color", "rainbow", "version"])

    assert result.exit_code == 2


@mark_cli
def test_env_log_level_does_not_break_output(monkeypatch: pytest.MonkeyPatch) -> None:
    """Diagnostics stay off at the default level; the command output is unchanged."""
    monkeypatch.setenv("DISPLAYKIT_LOG_LEVEL", "ERROR")

    result: Result = run_cli(["color", "a"])

    assert_SUCCESS(result)
    assert result.stdout == "#610000\n"


def test_log_records_go_to_stderr() -> None:
    """Log output never mixes with command output on stdout."""
    try:
        setup_logging(logging.DEBUG)
        handlers: list[logging.Handler] = logging.getLogger().handlers

        assert len(handlers) == 1
        handler: logging.Handler = handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr
    finally:
        setup_logging(TRACE_LEVEL)


@mark_cli
@pytest.mark.skipif(not CLICK_SEPARATES_STDERR, reason="needs separate stderr capture")
def test_debug_logging_keeps_json_output_parseable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DISPLAYKIT_LOG_LEVEL", "DEBUG")

    try:
        result: Result = run_cli(["flatten"], input_text='{"a": {"b": 1}}')
    finally:
        setup_logging(TRACE_LEVEL)

    assert_SUCCESS(result)
    assert json.loads(result.stdout) == {"a.b": 1}
    assert "DEBUG" in strip_ansi_codes(result.stderr)
