# topmark:header:start
#
#   project      : DisplayKit
#   file         : shortcut.py
#   file_relpath : src/displaykit/cli/commands/shortcut.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""``shortcut`` command: keyboard-shortcut labels."""

from __future__ import annotations

import click

from displaykit.cli.cmd_common import get_console
from displaykit.cli.io import emit_json
from displaykit.cli.options import output_format_option, platform_option
from displaykit.cli_shared.formats import OutputFormat
from displaykit.core.platform import Platform, current_platform
from displaykit.rendering.shortcuts import parse_keyboard_shortcut


@click.command(name="shortcut", help="Format an accelerator like 'super+shift+s' for display.")
@click.argument("shortcut")
@platform_option
@output_format_option
def shortcut_command(
    shortcut: str,
    platform: Platform | None,
    output_format: OutputFormat | None,
) -> None:
    """Print the display label for SHORTCUT."""
    console = get_console()
    target: Platform = platform or current_platform()
    label: str = parse_keyboard_shortcut(shortcut, target)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt == OutputFormat.JSON:
        emit_json(console, {"shortcut": shortcut, "platform": target.value, "label": label})
    elif fmt == OutputFormat.MARKDOWN:
        console.print(" + ".join(f"<kbd>{k}</kbd>" for k in label.split(" + ")))
    else:
        console.print(label)
