# topmark:header:start
#
#   project      : DisplayKit
#   file         : version.py
#   file_relpath : src/displaykit/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DisplayKit `version` command.

Prints the current DisplayKit version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from displaykit.cli.cmd_common import get_console, get_effective_verbosity
from displaykit.cli.io import emit_json
from displaykit.cli.options import output_format_option
from displaykit.cli_shared.formats import OutputFormat
from displaykit.constants import DISPLAYKIT_VERSION


@click.command(name="version", help="Show the current version of DisplayKit.")
@output_format_option
def version_command(output_format: OutputFormat | None = None) -> None:
    """Show the current version of DisplayKit.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    console = get_console()
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt == OutputFormat.JSON:
        emit_json(console, {"version": DISPLAYKIT_VERSION}, indent=None)
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# DisplayKit Version\n")
        console.print(f"**DisplayKit version: {DISPLAYKIT_VERSION}**")
    elif get_effective_verbosity() > 0:
        console.print(console.styled("DisplayKit version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(DISPLAYKIT_VERSION, bold=True)}")
    else:
        console.print(console.styled(DISPLAYKIT_VERSION, bold=True))
