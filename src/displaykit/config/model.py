# topmark:header:start
#
#   project      : DisplayKit
#   file         : model.py
#   file_relpath : src/displaykit/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DisplayKit configuration model.

Configuration is built in two stages:

- `MutableConfig` is a mutable draft used while discovering and merging
  layers (defaults, user config, project configs, explicit ``--config`` files).
- `Config` is the frozen snapshot produced by `MutableConfig.freeze()` and
  consumed by the rest of the package.

Merge order (lowest → highest precedence):
    1) Built-in defaults
    2) User config (``$XDG_CONFIG_HOME/displaykit/displaykit.toml``)
    3) Project configs discovered upward **root → current**; within a directory
       ``pyproject.toml`` is merged first, then ``displaykit.toml``
    4) Extra config files passed explicitly (in the order provided)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from displaykit.cli_shared.color import ColorMode
from displaykit.config.keys import Toml
from displaykit.config.loaders import (
    ConfigError,
    TomlTable,
    load_defaults_dict,
    load_toml_dict,
)
from displaykit.config.logging import DisplaykitLogger, get_logger
from displaykit.constants import CONFIG_FILE_NAME, PYPROJECT_TOML_NAME, PYPROJECT_TOOL_SECTION

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

logger: DisplaykitLogger = get_logger(__name__)

_CLI_PATH_KEYS: tuple[str, ...] = (
    Toml.KEY_WINDOWS,
    Toml.KEY_MACOS,
    Toml.KEY_LINUX,
    Toml.KEY_DEFAULT,
)


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        cli_paths (Mapping[str, str]): Executable path per platform key
            (``windows``, ``macos``, ``linux``) plus a ``default`` fallback.
        color_mode (ColorMode): Configured color preference.
        config_files (tuple[Path, ...]): Files that contributed to this config,
            in merge order.
    """

    cli_paths: Mapping[str, str]
    color_mode: ColorMode = ColorMode.AUTO
    config_files: tuple[Path, ...] = ()

    def to_toml_dict(self) -> TomlTable:
        """Return the effective configuration as a TOML-compatible dict."""
        return {
            Toml.SECTION_CLI_PATHS: dict(self.cli_paths),
            Toml.SECTION_OUTPUT: {Toml.KEY_COLOR: self.color_mode.value},
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this config."""
        return MutableConfig(
            cli_paths=dict(self.cli_paths),
            color_mode=self.color_mode,
            config_files=list(self.config_files),
        )


@dataclass
class MutableConfig:
    """Mutable configuration draft used while loading and merging layers.

    ``color_mode`` is tri-state: ``None`` means "not set by this layer".
    """

    cli_paths: dict[str, str] = field(default_factory=lambda: {})
    color_mode: ColorMode | None = None
    config_files: list[Path] = field(default_factory=lambda: [])
    root: bool = False

    def freeze(self) -> Config:
        """Freeze this draft into an immutable `Config`."""
        return Config(
            cli_paths=MappingProxyType(dict(self.cli_paths)),
            color_mode=self.color_mode or ColorMode.AUTO,
            config_files=tuple(self.config_files),
        )

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft.

        ``cli_paths`` is merged key-wise so a layer may override a single platform.
        """
        return MutableConfig(
            cli_paths={**self.cli_paths, **other.cli_paths},
            color_mode=other.color_mode if other.color_mode is not None else self.color_mode,
            config_files=self.config_files + other.config_files,
            root=other.root,
        )

    # --------------------------- Loaders/parsers --------------------------

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Build a draft from the built-in runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(
        cls, data: Mapping[str, Any], config_file: Path | None = None
    ) -> MutableConfig:
        """Create a draft from a parsed TOML table.

        Args:
            data (Mapping[str, Any]): The DisplayKit table (top level of
                ``displaykit.toml`` or ``[tool.displaykit]``).
            config_file (Path | None): Source file, used in error messages.

        Returns:
            MutableConfig: The parsed draft.

        Raises:
            ConfigError: If a known key has a value of the wrong type.
        """
        source: str = str(config_file) if config_file else "<defaults>"
        draft = cls()
        draft.root = bool(data.get(Toml.KEY_ROOT, False))

        paths_tbl: Any = data.get(Toml.SECTION_CLI_PATHS, {})
        if not isinstance(paths_tbl, dict):
            raise ConfigError(f"[{Toml.SECTION_CLI_PATHS}] must be a table in {source}")
        for key, value in paths_tbl.items():
            if key not in _CLI_PATH_KEYS:
                logger.warning(
                    "Ignoring unknown key '%s' in [%s] (%s)", key, Toml.SECTION_CLI_PATHS, source
                )
                continue
            if not isinstance(value, str):
                raise ConfigError(
                    f"[{Toml.SECTION_CLI_PATHS}].{key} must be a string in {source}, got {value!r}"
                )
            draft.cli_paths[key] = value

        output_tbl: Any = data.get(Toml.SECTION_OUTPUT, {})
        if not isinstance(output_tbl, dict):
            raise ConfigError(f"[{Toml.SECTION_OUTPUT}] must be a table in {source}")
        color_raw: Any = output_tbl.get(Toml.KEY_COLOR)
        if color_raw is not None:
            try:
                draft.color_mode = ColorMode(str(color_raw).lower())
            except ValueError as e:
                allowed = ", ".join(m.value for m in ColorMode)
                raise ConfigError(
                    f"[{Toml.SECTION_OUTPUT}].{Toml.KEY_COLOR} must be one of {allowed} "
                    f"in {source}, got {color_raw!r}"
                ) from e

        if config_file is not None:
            draft.config_files = [config_file]
        logger.debug("Parsed config from %s: %s", source, draft)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a draft from a single TOML file.

        For ``pyproject.toml`` only the ``[tool.displaykit]`` table is used.

        Returns:
            MutableConfig | None: The draft, or ``None`` when a ``pyproject.toml``
            has no ``[tool.displaykit]`` table.

        Raises:
            ConfigError: If the file cannot be parsed, or if ``tool`` or
                ``tool.displaykit`` in a ``pyproject.toml`` is not a table.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        data: TomlTable = load_toml_dict(path)
        if path.name == PYPROJECT_TOML_NAME:
            tool: Any = data.get("tool", {})
            if not isinstance(tool, dict):
                raise ConfigError(f"[tool] must be a table in {path}")
            tool_section: Any = tool.get(PYPROJECT_TOOL_SECTION)
            if tool_section is not None and not isinstance(tool_section, dict):
                raise ConfigError(f"[tool.{PYPROJECT_TOOL_SECTION}] must be a table in {path}")
            if tool_section is None:
                logger.debug("No [tool.%s] table in %s", PYPROJECT_TOOL_SECTION, path)
                return None
            data = tool_section
        return cls.from_toml_dict(data, config_file=path)

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return project config files found by walking upward from ``start``.

        Files are returned root-most first, nearest last. Within one directory
        ``pyproject.toml`` comes before ``displaykit.toml``. Traversal stops
        after a directory whose config sets ``root = true``.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            entries: list[Path] = []
            stop_here = False
            for name in (PYPROJECT_TOML_NAME, CONFIG_FILE_NAME):
                p: Path = cur / name
                if not p.is_file():
                    continue
                try:
                    draft = cls.from_toml_file(p)
                except ConfigError as e:
                    # Discovery is best-effort; the error resurfaces when merging.
                    logger.debug("Ignoring parse error in %s during discovery: %s", p, e)
                    entries.append(p)
                    continue
                if draft is None:
                    continue
                logger.debug("Discovered config file: %s", p)
                entries.append(p)
                stop_here = stop_here or draft.root
            if entries:
                per_dir.append(entries)

            parent: Path = cur.parent
            if stop_here:
                logger.debug("Stopping upward config discovery at %s due to root=true", cur)
                break
            if parent == cur:
                break
            cur = parent

        ordered: list[Path] = []
        for entries in reversed(per_dir):
            ordered.extend(entries)
        return ordered

    @classmethod
    def discover_user_config_file(cls) -> Path | None:
        """Return the user-scoped config path if it exists.

        Looks under ``$XDG_CONFIG_HOME/displaykit/displaykit.toml`` (default
        ``~/.config``).
        """
        xdg: str | None = os.environ.get("XDG_CONFIG_HOME")
        base: Path = Path(xdg) if xdg else Path.home() / ".config"
        path: Path = base / "displaykit" / CONFIG_FILE_NAME
        return path if path.is_file() else None

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft.

        Args:
            anchor (Path | None): Directory where upward discovery starts (CWD if None).
            extra_config_files (Iterable[Path] | None): Explicit files merged last,
                in the given order.
            no_config (bool): If True, skip user and project discovery.

        Returns:
            MutableConfig: The merged draft.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            user_cfg_path: Path | None = cls.discover_user_config_file()
            if user_cfg_path is not None:
                user_cfg = cls.from_toml_file(user_cfg_path)
                if user_cfg is not None:
                    draft = draft.merge_with(user_cfg)

            for cfg_path in cls.discover_local_config_files(anchor or Path.cwd()):
                mc = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            mc = cls.from_toml_file(Path(extra))
            if mc is not None:
                draft = draft.merge_with(mc)

        return draft
