# topmark:header:start
#
#   project      : DisplayKit
#   file         : color.py
#   file_relpath : src/displaykit/cli/commands/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""``color`` command: deterministic colors for strings."""

from __future__ import annotations

import click

from displaykit.cli.cmd_common import get_color_enabled, get_console
from displaykit.cli.io import emit_json
from displaykit.cli.options import output_format_option
from displaykit.cli_shared.formats import OutputFormat
from displaykit.cli_shared.markdown import render_markdown_table
from displaykit.rendering.colors import color_swatch, string_to_color

SWATCH_BLOCK: str = "██"


@click.command(name="color", help="Print the deterministic #rrggbb color of each TEXT.")
@click.argument("texts", nargs=-1, required=True)
@click.option("--swatch", is_flag=True, help="Show each text in its color (text format only).")
@output_format_option
def color_command(
    texts: tuple[str, ...],
    swatch: bool,
    output_format: OutputFormat | None,
) -> None:
    """Print one color per input string."""
    console = get_console()
    colors: list[tuple[str, str]] = [(t, string_to_color(t)) for t in texts]
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    color_on: bool = get_color_enabled()

    if fmt == OutputFormat.JSON:
        emit_json(console, [{"text": t, "color": c} for t, c in colors])
    elif fmt == OutputFormat.MARKDOWN:
        rows = [[t, f"`{c}`"] for t, c in colors]
        console.print(render_markdown_table(["Text", "Color"], rows))
    else:
        for t, c in colors:
            if swatch:
                console.print(f"{color_swatch(t, SWATCH_BLOCK, enable_color=color_on)} {c}  {t}")
            elif len(colors) == 1:
                console.print(c)
            else:
                console.print(f"{c}  {t}")
