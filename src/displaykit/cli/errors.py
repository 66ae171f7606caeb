# topmark:header:start
#
#   project      : DisplayKit
#   file         : errors.py
#   file_relpath : src/displaykit/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the DisplayKit CLI.

Raise these from commands to signal errors with standardized messages and exit
codes. Exceptions print through the project console when one is available on
the Click context, and fall back to Click's default display otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from displaykit.cli_shared.exit_codes import ExitCode


class DisplaykitError(click.ClickException):
    """Base class for all DisplayKit CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class DisplaykitUsageError(DisplaykitError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class DisplaykitInputError(DisplaykitError):
    """Error for input data that cannot be decoded (invalid JSON or text encoding)."""

    exit_code = ExitCode.INPUT_ERROR


class DisplaykitConfigError(DisplaykitError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class DisplaykitFileNotFoundError(DisplaykitError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class DisplaykitIOError(DisplaykitError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


def error_from_os_error(exc: OSError, path: object) -> DisplaykitError:
    """Map an ``OSError`` raised for ``path`` to the matching CLI error."""
    if isinstance(exc, FileNotFoundError):
        return DisplaykitFileNotFoundError(f"No such file: {path}")
    reason: str = exc.strerror or str(exc)
    return DisplaykitIOError(f"Cannot read {path}: {reason}")
