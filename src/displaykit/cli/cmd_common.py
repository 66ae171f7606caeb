# topmark:header:start
#
#   project      : DisplayKit
#   file         : cmd_common.py
#   file_relpath : src/displaykit/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by DisplayKit commands for accessing Click context state."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from displaykit.cli_shared.console_api import ConsoleLike
    from displaykit.config import Config


def get_console(ctx: click.Context | None = None) -> ConsoleLike:
    """Return the console stored on the (current) Click context."""
    ctx = ctx or click.get_current_context()
    return ctx.obj["console"]


def get_config(ctx: click.Context | None = None) -> Config:
    """Return the frozen config stored on the (current) Click context."""
    ctx = ctx or click.get_current_context()
    return ctx.obj["config"]


def get_effective_verbosity(ctx: click.Context | None = None) -> int:
    """Return the program-output verbosity (-1 quiet, 0 default, >0 verbose)."""
    ctx = ctx or click.get_current_context()
    return int(ctx.obj.get("verbosity_level", 0))


def get_color_enabled(ctx: click.Context | None = None) -> bool:
    """Return whether ANSI color was enabled for this invocation."""
    ctx = ctx or click.get_current_context()
    return bool(ctx.obj.get("color_enabled", False))
