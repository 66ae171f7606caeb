# topmark:header:start
#
#   project      : DisplayKit
#   file         : __init__.py
#   file_relpath : src/displaykit/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for DisplayKit.

TOML configuration is parsed with tomlkit, merged across layers into a
[`MutableConfig`][displaykit.config.model.MutableConfig] draft, and frozen into
an immutable [`Config`][displaykit.config.model.Config].
"""

from __future__ import annotations

from displaykit.config.loaders import ConfigError
from displaykit.config.model import Config, MutableConfig

__all__ = [
    "Config",
    "ConfigError",
    "MutableConfig",
]
