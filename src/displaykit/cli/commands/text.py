# topmark:header:start
#
#   project      : DisplayKit
#   file         : text.py
#   file_relpath : src/displaykit/cli/commands/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Text transformation commands.

Each command reads its input from the TEXT argument, ``--file`` or STDIN and
writes the transformed text to stdout:

- ``camel``: snake/kebab-case → camelCase.
- ``camel-keys``: camel-case the keys of a JSON document.
- ``strip-ansi``: remove ANSI color/erase sequences.
- ``html2md``: HTML snippet → text with Markdown images.
- ``encode``: percent-encode as a URI component.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from displaykit.cli.cmd_common import get_console
from displaykit.cli.errors import DisplaykitInputError
from displaykit.cli.io import emit_json, read_json_input, read_text_input
from displaykit.cli.options import text_input_options
from displaykit.config.logging import get_logger
from displaykit.text import (
    convert_html_to_markdown,
    encode,
    keys_to_camel_case,
    strip_ansi_codes,
    to_camel_case,
)

if TYPE_CHECKING:
    from pathlib import Path

logger = get_logger(__name__)


@click.command(name="camel", help="Convert snake_case or kebab-case text to camelCase.")
@text_input_options
def camel_command(text: str | None, input_file: Path | None) -> None:
    """Print the camel-cased input, line by line."""
    raw: str = read_text_input(text, input_file)
    console = get_console()
    for line in raw.splitlines() or [""]:
        console.print(to_camel_case(line))


@click.command(name="camel-keys", help="Camel-case every object key in a JSON document.")
@text_input_options
@click.option("--compact", is_flag=True, help="Emit compact JSON (no indentation).")
def camel_keys_command(text: str | None, input_file: Path | None, compact: bool) -> None:
    """Print the JSON document with camel-cased keys."""
    data: Any = read_json_input(text, input_file)
    emit_json(get_console(), keys_to_camel_case(data), indent=None if compact else 2)


@click.command(name="strip-ansi", help="Remove ANSI color and erase sequences.")
@text_input_options
def strip_ansi_command(text: str | None, input_file: Path | None) -> None:
    """Print the input with ANSI sequences removed."""
    raw: str = read_text_input(text, input_file)
    get_console().print(strip_ansi_codes(raw), nl=False)


@click.command(name="html2md", help="Convert an HTML snippet to text with Markdown images.")
@text_input_options
def html2md_command(text: str | None, input_file: Path | None) -> None:
    """Print the converted snippet."""
    raw: str = read_text_input(text, input_file)
    get_console().print(convert_html_to_markdown(raw), nl=False)


@click.command(name="encode", help="Percent-encode text as a URI component.")
@text_input_options
@click.option(
    "--keep-newline",
    is_flag=True,
    help="Encode the trailing newline of file/STDIN input instead of dropping it.",
)
def encode_command(text: str | None, input_file: Path | None, keep_newline: bool) -> None:
    """Print the encoded component."""
    raw: str = read_text_input(text, input_file)
    if text is None and not keep_newline:
        raw = raw.removesuffix("\n")
    try:
        encoded: str = encode(raw)
    except ValueError as e:
        raise DisplaykitInputError(str(e)) from e
    get_console().print(encoded)
