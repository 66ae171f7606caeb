# topmark:header:start
#
#   project      : DisplayKit
#   file         : options.py
#   file_relpath : src/displaykit/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI options for DisplayKit.

This module centralizes reusable options (verbosity, color, output format,
text input) and their resolution logic so commands stay thin.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from displaykit.cli.cli_types import EnumChoiceParam, PlatformParam
from displaykit.cli.errors import DisplaykitUsageError
from displaykit.cli_shared.color import ColorMode
from displaykit.cli_shared.formats import OutputFormat
from displaykit.config.logging import get_logger

P = ParamSpec("P")
R = TypeVar("R")


logger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v`` / ``-q`` counts.

    Returns:
        int: ``verbose_count`` when verbose, ``-1`` when quiet, ``0`` otherwise.

    Raises:
        DisplaykitUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise DisplaykitUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` (counted, mutually exclusive)."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` (auto, always, never) and ``--no-color``."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` (repeatable) and ``--no-config``."""
    f = click.option(
        "--config",
        "config_files",
        type=click.Path(dir_okay=False, path_type=Path),
        multiple=True,
        help="Extra config file(s) merged after discovered configs (repeatable).",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore user and project config files; use built-in defaults.",
    )(f)
    return f


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--format`` accepting the `OutputFormat` values."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)


def platform_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--platform`` to override host platform detection."""
    return click.option(
        "--platform",
        "platform",
        type=PlatformParam(),
        default=None,
        help="Target platform (windows, macos, linux); defaults to the current platform.",
    )(f)


def text_input_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add an optional ``TEXT`` argument and ``-f/--file``.

    When neither is given, the command reads STDIN.
    """
    f = click.option(
        "-f",
        "--file",
        "input_file",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Read input from this file instead of the TEXT argument or STDIN.",
    )(f)
    f = click.argument("text", required=False)(f)
    return f
