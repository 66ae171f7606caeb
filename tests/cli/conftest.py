# topmark:header:start
#
#   project      : DisplayKit
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running DisplayKit through Click's test runner.

`run_cli_in()` changes the working directory before invoking the CLI so that
project config discovery starts from the directory the test prepared.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any

from click.testing import CliRunner, Result

from displaykit.cli.main import cli
from displaykit.cli_shared.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI from the current working directory.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["color", "a"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def run_cli_in(
    cwd: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with ``cwd`` as the working directory.

    Args:
        cwd (Path): Directory to run from; project config discovery starts here.
        argv (str | Sequence[str] | None): CLI argument vector.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    previous: str = os.getcwd()
    try:
        os.chdir(cwd)
        return run_cli(argv, input_text=input_text)
    finally:
        os.chdir(previous)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_INPUT_ERROR(result: Result) -> None:
    """Assert that the command exited with INPUT_ERROR (code 65)."""
    assert result.exit_code == ExitCode.INPUT_ERROR, result.output


def assert_FILE_NOT_FOUND(result: Result) -> None:
    """Assert that the command exited with FILE_NOT_FOUND (code 66)."""
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
