# topmark:header:start
#
#   project      : DisplayKit
#   file         : files.py
#   file_relpath : src/displaykit/cli/commands/files.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""``file-size`` command."""

from __future__ import annotations

import asyncio
from pathlib import Path

import click

from displaykit.cli.cmd_common import get_console
from displaykit.cli.errors import error_from_os_error
from displaykit.cli.io import emit_json
from displaykit.cli.options import output_format_option
from displaykit.cli_shared.formats import OutputFormat
from displaykit.cli_shared.markdown import render_markdown_table
from displaykit.utils.file import format_file_size, get_file_size


async def _sizes(paths: tuple[Path, ...]) -> list[int]:
    return list(await asyncio.gather(*(get_file_size(p) for p in paths)))


@click.command(name="file-size", help="Print the size of each PATH in bytes.")
@click.argument("paths", nargs=-1, required=True, type=click.Path(path_type=Path))
@click.option("--human", is_flag=True, help="Use binary units (KiB, MiB, ...).")
@output_format_option
def file_size_command(
    paths: tuple[Path, ...],
    human: bool,
    output_format: OutputFormat | None,
) -> None:
    """Print file sizes; fails on the first missing or unreadable path."""
    console = get_console()
    try:
        sizes: list[int] = asyncio.run(_sizes(paths))
    except OSError as e:
        raise error_from_os_error(e, e.filename or paths[0]) from e

    def _fmt(n: int) -> str:
        return format_file_size(n) if human else str(n)

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt == OutputFormat.JSON:
        emit_json(console, [{"path": str(p), "size": n} for p, n in zip(paths, sizes)])
    elif fmt == OutputFormat.MARKDOWN:
        rows = [[f"`{p}`", _fmt(n)] for p, n in zip(paths, sizes)]
        console.print(render_markdown_table(["Path", "Size"], rows, align={1: "right"}))
    elif len(paths) == 1:
        console.print(_fmt(sizes[0]))
    else:
        for p, n in zip(paths, sizes):
            console.print(f"{_fmt(n)}\t{p}")
