# topmark:header:start
#
#   project      : DisplayKit
#   file         : loaders.py
#   file_relpath : src/displaykit/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading DisplayKit configuration from:
- the packaged default TOML template, and
- on-disk TOML files (``displaykit.toml`` / ``pyproject.toml``).

Parsing is done with ``tomlkit`` and returned as plain ``dict`` structures.
"""

from __future__ import annotations

from importlib.resources import files
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from displaykit.config.keys import Toml
from displaykit.config.logging import get_logger
from displaykit.constants import (
    DEFAULT_TOML_CONFIG_NAME,
    DEFAULT_TOML_CONFIG_PACKAGE,
    HEADER_END_MARKER,
)

if TYPE_CHECKING:
    from pathlib import Path

    from displaykit.config.logging import DisplaykitLogger

TomlTable = dict[str, Any]

logger: DisplaykitLogger = get_logger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration source cannot be read or parsed."""


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_defaults_dict() -> TomlTable:
    """Return DisplayKit's **runtime defaults** as a Python dict.

    Runtime defaults live in code so DisplayKit keeps working when the packaged
    template is missing. The returned dict is new on every call.
    """
    return {
        Toml.SECTION_CLI_PATHS: {
            Toml.KEY_WINDOWS: "%LOCALAPPDATA%\\screenpipe\\screenpipe.exe",
            Toml.KEY_MACOS: "/Applications/screenpipe.app/Contents/MacOS/screenpipe",
            Toml.KEY_LINUX: "/usr/local/bin/screenpipe",
            Toml.KEY_DEFAULT: "screenpipe",
        },
        Toml.SECTION_OUTPUT: {
            Toml.KEY_COLOR: "auto",
        },
    }


def load_default_config_template_toml_text() -> str:
    """Load the bundled, annotated default config template as text.

    The file header block (everything up to the header end marker) is removed
    so the output starts at the template content. If the packaged template
    cannot be read, a document generated from the runtime defaults is returned.
    """
    resource = files(DEFAULT_TOML_CONFIG_PACKAGE).joinpath(DEFAULT_TOML_CONFIG_NAME)
    try:
        toml_text: str = resource.read_text(encoding="utf8")
    except OSError as exc:
        logger.warning("Cannot read packaged default config template %s: %s", resource, exc)
        return tomlkit.dumps(load_defaults_dict())

    lines: list[str] = toml_text.splitlines(keepends=True)
    for i, line in enumerate(lines):
        if line.strip() == f"# {HEADER_END_MARKER}":
            return "".join(lines[i + 1 :]).lstrip("\n")
    return toml_text


def to_toml(data: TomlTable) -> str:
    """Serialize a plain dict to TOML text."""
    return tomlkit.dumps(data)


def nest_toml_under_section(toml_doc: str, section_keys: str) -> str:
    r"""Return ``toml_doc`` nested under a dotted section path.

    ``nest_toml_under_section("a = 1\n", "tool.displaykit")`` yields a document
    equivalent to ``[tool.displaykit]\na = 1``. Leading comments (the preamble
    before the first keyed entry) stay at the top; item-level comments travel
    with their items.

    Raises:
        ValueError: If ``section_keys`` has no non-empty component.
        ConfigError: If ``toml_doc`` is not valid TOML.
    """
    keys: list[str] = [k for k in section_keys.split(".") if k]
    if not keys:
        raise ValueError("section_keys must contain at least one non-empty component")
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(toml_doc)
    except TomlkitParseError as exc:
        raise ConfigError(f"Error parsing TOML document: {exc}") from exc

    start_index: int = next((i for i, (key, _) in enumerate(doc.body) if key is not None), 0)

    new_doc: tomlkit.TOMLDocument = tomlkit.document()
    new_doc.body.extend(doc.body[:start_index])

    target: Any = new_doc
    for key in keys:
        target.add(key, tomlkit.table(is_super_table=key != keys[-1]))
        target = target[key]
    for item_key, item_value in doc.items():
        target.add(item_key, item_value)
    return new_doc.as_string()
