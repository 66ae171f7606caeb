# topmark:header:start
#
#   project      : DisplayKit
#   file         : paths.py
#   file_relpath : src/displaykit/cli/commands/paths.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""``cli-path`` command: the companion executable's install path."""

from __future__ import annotations

import click

from displaykit.cli.cmd_common import get_config, get_console
from displaykit.cli.io import emit_json
from displaykit.cli.options import output_format_option, platform_option
from displaykit.cli_shared.formats import OutputFormat
from displaykit.core.paths import expand_cli_path, get_cli_path
from displaykit.core.platform import Platform, current_platform


@click.command(name="cli-path", help="Print the CLI executable path for a platform.")
@platform_option
@click.option("--expand", is_flag=True, help="Expand %VAR%, $VAR and ~ references.")
@output_format_option
def cli_path_command(
    platform: Platform | None,
    expand: bool,
    output_format: OutputFormat | None,
) -> None:
    """Print the configured executable path."""
    console = get_console()
    target: Platform = platform or current_platform()
    path: str = get_cli_path(target, config=get_config())
    if expand:
        path = expand_cli_path(path)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt == OutputFormat.JSON:
        emit_json(console, {"platform": target.value, "path": path})
    elif fmt == OutputFormat.MARKDOWN:
        console.print(f"- **{target.value}**: `{path}`")
    else:
        console.print(path)
