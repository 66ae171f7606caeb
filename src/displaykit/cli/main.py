# topmark:header:start
#
#   project      : DisplayKit
#   file         : main.py
#   file_relpath : src/displaykit/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DisplayKit command-line interface.

Group-level options (verbosity, color, configuration) are resolved once in
`init_common_state` and stored in ``ctx.obj``; subcommands read them back
through `displaykit.cli.cmd_common`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from displaykit.cli.commands.color import color_command
from displaykit.cli.commands.config import config_command
from displaykit.cli.commands.files import file_size_command
from displaykit.cli.commands.mapping import flatten_command, unflatten_command
from displaykit.cli.commands.paths import cli_path_command
from displaykit.cli.commands.shortcut import shortcut_command
from displaykit.cli.commands.text import (
    camel_command,
    camel_keys_command,
    encode_command,
    html2md_command,
    strip_ansi_command,
)
from displaykit.cli.commands.version import version_command
from displaykit.cli.console import ClickConsole
from displaykit.cli.errors import DisplaykitConfigError
from displaykit.cli.options import (
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_verbosity,
)
from displaykit.cli_shared.color import ColorMode, resolve_color_mode
from displaykit.config.loaders import ConfigError
from displaykit.config.logging import get_logger, resolve_env_log_level, setup_logging
from displaykit.config.model import MutableConfig

if TYPE_CHECKING:
    from pathlib import Path

    from displaykit.cli_shared.console_api import ConsoleLike
    from displaykit.config.model import Config

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_files: tuple[Path, ...],
    no_config: bool,
) -> None:
    """Initialize shared state (verbosity, logging, config, color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_files (tuple[Path, ...]): Extra config files from ``--config``.
        no_config (bool): Whether ``--no-config`` was passed.

    Raises:
        DisplaykitConfigError: If a configuration file cannot be loaded.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    setup_logging(level=resolve_env_log_level())

    try:
        config: Config = MutableConfig.load_merged(
            extra_config_files=config_files,
            no_config=no_config,
        ).freeze()
    except ConfigError as e:
        raise DisplaykitConfigError(str(e)) from e
    ctx.obj["config"] = config
    logger.debug("Effective config: %s", config)

    # --no-color beats --color, which beats the config file.
    effective_mode: ColorMode | None
    if no_color:
        effective_mode = ColorMode.NEVER
    elif color_mode is not None:
        effective_mode = color_mode
    else:
        effective_mode = config.color_mode
    enable_color: bool = resolve_color_mode(color_mode_override=effective_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="DisplayKit: text and display helpers for the terminal.",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_files: tuple[Path, ...],
    no_config: bool,
) -> None:
    """Entry point for the DisplayKit CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_files=config_files,
        no_config=no_config,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'displaykit color TEXT' or 'displaykit --help'.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(config_command)

cli.add_command(camel_command)
cli.add_command(camel_keys_command)
cli.add_command(strip_ansi_command)
cli.add_command(html2md_command)
cli.add_command(encode_command)

cli.add_command(color_command)
cli.add_command(shortcut_command)

cli.add_command(cli_path_command)
cli.add_command(file_size_command)

cli.add_command(flatten_command)
cli.add_command(unflatten_command)

if __name__ == "__main__":
    cli()
