# topmark:header:start
#
#   project      : DisplayKit
#   file         : mapping.py
#   file_relpath : src/displaykit/cli/commands/mapping.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""``flatten`` / ``unflatten`` commands for JSON objects."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from displaykit.cli.cmd_common import get_console
from displaykit.cli.errors import DisplaykitInputError
from displaykit.cli.io import emit_json, read_json_input
from displaykit.cli.options import text_input_options
from displaykit.utils.mapping import flatten_object, unflatten_object

if TYPE_CHECKING:
    from pathlib import Path


def _require_object(data: Any) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise DisplaykitInputError(f"Expected a JSON object, got {type(data).__name__}")
    return data


@click.command(name="flatten", help="Flatten a nested JSON object into dotted keys.")
@text_input_options
@click.option("--compact", is_flag=True, help="Emit compact JSON (no indentation).")
def flatten_command(text: str | None, input_file: Path | None, compact: bool) -> None:
    """Print the flattened object."""
    data = _require_object(read_json_input(text, input_file))
    emit_json(get_console(), flatten_object(data), indent=None if compact else 2)


@click.command(name="unflatten", help="Rebuild a nested JSON object from dotted keys.")
@text_input_options
@click.option("--compact", is_flag=True, help="Emit compact JSON (no indentation).")
def unflatten_command(text: str | None, input_file: Path | None, compact: bool) -> None:
    """Print the nested object."""
    data = _require_object(read_json_input(text, input_file))
    emit_json(get_console(), unflatten_object(data), indent=None if compact else 2)
