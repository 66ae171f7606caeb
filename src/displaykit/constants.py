# topmark:header:start
#
#   project      : DisplayKit
#   file         : constants.py
#   file_relpath : src/displaykit/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DisplayKit Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

DISPLAYKIT_VERSION: str = get_version("displaykit")

# Name of the bundled default config inside the package `displaykit.config`:
DEFAULT_TOML_CONFIG_PACKAGE: str = "displaykit.config"
DEFAULT_TOML_CONFIG_NAME: str = "displaykit-default.toml"

CONFIG_FILE_NAME: str = "displaykit.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "displaykit"

HEADER_END_MARKER: str = "topmark:header:end"

# Executable name used when no platform-specific path is known.
DEFAULT_CLI_NAME: str = "screenpipe"
