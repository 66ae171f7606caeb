# topmark:header:start
#
#   project      : DisplayKit
#   file         : config.py
#   file_relpath : src/displaykit/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""``config`` command group: inspect and bootstrap configuration.

Subcommands:
    - ``config init``: print the annotated default template.
    - ``config dump``: print the effective merged configuration.
"""

from __future__ import annotations

import click

from displaykit.cli.cmd_common import get_config, get_console, get_effective_verbosity
from displaykit.cli.errors import DisplaykitUsageError
from displaykit.cli.io import emit_json
from displaykit.cli.options import output_format_option
from displaykit.cli_shared.formats import OutputFormat
from displaykit.config.loaders import (
    load_default_config_template_toml_text,
    nest_toml_under_section,
    to_toml,
)
from displaykit.config.logging import get_logger
from displaykit.constants import PYPROJECT_TOOL_SECTION

logger = get_logger(__name__)


def _print_toml(toml_text: str, *, title: str, fmt: OutputFormat) -> None:
    console = get_console()
    if fmt == OutputFormat.MARKDOWN:
        console.print(f"# {title}")
        console.print()
        console.print("```toml")
        console.print(toml_text.rstrip("\n"))
        console.print("```")
        return
    if get_effective_verbosity() > 0:
        console.print(console.styled(f"{title}:", bold=True, underline=True))
        console.print()
    console.print(toml_text.rstrip("\n"))


@click.group(name="config", help="Inspect and bootstrap DisplayKit configuration.")
def config_command() -> None:
    """Configuration commands."""


@config_command.command(name="init", help="Print an annotated starter configuration.")
@click.option("--pyproject", is_flag=True, help="Nest the output under [tool.displaykit].")
@output_format_option
def config_init_command(pyproject: bool, output_format: OutputFormat | None) -> None:
    """Print the packaged default template (optionally for pyproject.toml)."""
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt == OutputFormat.JSON:
        raise DisplaykitUsageError("config init: JSON output is not supported; use 'config dump'.")
    toml_text: str = load_default_config_template_toml_text()
    if pyproject:
        toml_text = nest_toml_under_section(toml_text, f"tool.{PYPROJECT_TOOL_SECTION}")
    _print_toml(toml_text, title="Initial DisplayKit configuration (TOML)", fmt=fmt)


@config_command.command(name="dump", help="Print the effective merged configuration.")
@output_format_option
def config_dump_command(output_format: OutputFormat | None) -> None:
    """Print the configuration after merging all layers."""
    config = get_config()
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt == OutputFormat.JSON:
        emit_json(
            get_console(),
            {
                "config": config.to_toml_dict(),
                "config_files": [str(p) for p in config.config_files],
            },
        )
        return
    toml_text: str = to_toml(config.to_toml_dict())
    if config.config_files:
        sources: str = "\n".join(f"# - {p}" for p in config.config_files)
        toml_text = f"# Merged from:\n{sources}\n\n{toml_text}"
    _print_toml(toml_text, title="Effective DisplayKit configuration (TOML)", fmt=fmt)
