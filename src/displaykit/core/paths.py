# topmark:header:start
#
#   project      : DisplayKit
#   file         : paths.py
#   file_relpath : src/displaykit/core/paths.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Executable path lookup per platform.

The paths are the well-known install locations of the companion CLI. They are
returned verbatim (environment references unexpanded) unless the caller asks
for expansion, because they are typically shown to users or written into
shell snippets for another machine.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from displaykit.config.keys import Toml
from displaykit.config.loaders import load_defaults_dict
from displaykit.config.logging import get_logger
from displaykit.constants import DEFAULT_CLI_NAME
from displaykit.core.platform import Platform, current_platform

if TYPE_CHECKING:
    from collections.abc import Mapping

    from displaykit.config import Config

logger = get_logger(__name__)


def _default_cli_paths() -> Mapping[str, str]:
    return load_defaults_dict()[Toml.SECTION_CLI_PATHS]


def get_cli_path(platform: Platform | None = None, *, config: Config | None = None) -> str:
    """Return the CLI executable path for ``platform``.

    Args:
        platform (Platform | None): Target platform; defaults to the current one.
        config (Config | None): Configuration whose ``[cli_paths]`` table
            overrides the built-in defaults.

    Returns:
        str: The path for the platform, or the ``default`` entry (``"screenpipe"``
        unless configured) for unknown platforms.
    """
    target: Platform = platform or current_platform()
    paths: Mapping[str, str] = config.cli_paths if config is not None else _default_cli_paths()
    key: str = target.value if target is not Platform.UNKNOWN else Toml.KEY_DEFAULT
    path: str | None = paths.get(key)
    if path is None:
        path = paths.get(Toml.KEY_DEFAULT, DEFAULT_CLI_NAME)
    logger.debug("CLI path for %s: %s", target.value, path)
    return path


def expand_cli_path(path: str) -> str:
    """Expand ``%VAR%``, ``$VAR`` and ``~`` references in ``path``.

    Windows-style ``%VAR%`` references are expanded on every host. Unknown
    variables are left as-is.
    """
    expanded: str = os.path.expandvars(path)
    if "%" in expanded:
        for name, value in os.environ.items():
            expanded = expanded.replace(f"%{name}%", value)
    return os.path.expanduser(expanded)
