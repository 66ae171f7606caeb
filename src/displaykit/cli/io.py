# topmark:header:start
#
#   project      : DisplayKit
#   file         : io.py
#   file_relpath : src/displaykit/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input and output helpers for CLI commands."""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, Any

from displaykit.cli.errors import DisplaykitInputError, DisplaykitUsageError, error_from_os_error
from displaykit.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from displaykit.cli_shared.console_api import ConsoleLike

logger = get_logger(__name__)


def read_text_input(text: str | None, input_file: Path | None) -> str:
    """Return command input from the TEXT argument, ``--file``, or STDIN.

    Raises:
        DisplaykitUsageError: If both TEXT and ``--file`` are given.
        DisplaykitInputError: If the file is not valid UTF-8.
        DisplaykitError: If the file cannot be read (see `error_from_os_error`).
    """
    if text is not None and input_file is not None:
        raise DisplaykitUsageError("Provide either TEXT or --file, not both.")
    if text is not None:
        return text
    if input_file is not None:
        logger.debug("Reading input from %s", input_file)
        try:
            return input_file.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise DisplaykitInputError(f"{input_file} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise error_from_os_error(e, input_file) from e
    logger.debug("Reading input from STDIN")
    return sys.stdin.read()


def read_json_input(text: str | None, input_file: Path | None) -> Any:
    """Parse JSON from the TEXT argument, ``--file``, or STDIN.

    Raises:
        DisplaykitInputError: If the input is not valid JSON.
    """
    raw: str = read_text_input(text, input_file)
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise DisplaykitInputError(f"Invalid JSON input: {e}") from e


def emit_json(console: ConsoleLike, payload: Any, *, indent: int | None = 2) -> None:
    """Print ``payload`` as JSON (non-ASCII characters kept as-is)."""
    console.print(json.dumps(payload, indent=indent, ensure_ascii=False))
