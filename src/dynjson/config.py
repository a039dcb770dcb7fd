"""
Configuration for dynjson.

Only the command line tool reads this; ``serialize()`` called from code
always uses the options it is given. Loaded from:
1. Defaults (this file)
2. Config file (~/.config/dynjson/config.toml) if exists
3. Environment variables (DYNJSON_*) override file
4. CLI flags override everything
"""

from __future__ import annotations

import contextlib
import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .serializer import SerializerOptions

log = logging.getLogger(__name__)


@dataclass
class SerializerConfig:
    """Serializer output mode."""
    escape_strings: bool = False
    null_literal: bool = False

    def to_options(self) -> SerializerOptions:
        return SerializerOptions(
            escape_strings=self.escape_strings,
            null_literal=self.null_literal,
        )


@dataclass
class Config:
    """Root config with all settings."""
    serializer: SerializerConfig = field(default_factory=SerializerConfig)


def get_config_path() -> Path:
    """Get config file path, respecting XDG."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "dynjson" / "config.toml"
    return Path.home() / ".config" / "dynjson" / "config.toml"


def load_config() -> Config:
    """Load config from file if exists, else return defaults."""
    config = Config()
    path = get_config_path()

    if path.exists():
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
            config = _apply_toml(config, data)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            log.warning("ignoring config file %s: %s", path, exc)

    config = _apply_env(config)

    return config


def _apply_toml(config: Config, data: dict) -> Config:
    """Apply toml data to config."""
    if "serializer" in data:
        s = data["serializer"]
        if not isinstance(s, dict):
            log.warning("ignoring [serializer]: expected a table, got %s", type(s).__name__)
            return config
        for attr in ("escape_strings", "null_literal"):
            if attr not in s:
                continue
            if isinstance(s[attr], bool):
                setattr(config.serializer, attr, s[attr])
            else:
                log.warning("ignoring serializer.%s: expected true or false, got %r", attr, s[attr])

    return config


def _apply_env(config: Config) -> Config:
    """Apply environment variable overrides."""
    env_map: dict[str, tuple[str, str, type]] = {
        "DYNJSON_ESCAPE_STRINGS": ("serializer", "escape_strings", bool),
        "DYNJSON_NULL_LITERAL": ("serializer", "null_literal", bool),
    }

    for env_key, (section, attr, conv) in env_map.items():
        val = os.environ.get(env_key)
        if val is not None:
            with contextlib.suppress(ValueError, AttributeError):
                converted = val.lower() in ("true", "1", "yes") if conv is bool else conv(val)
                setattr(getattr(config, section), attr, converted)

    return config


_config: Config | None = None


def get_config() -> Config:
    """Get the global config instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Drop the cached config so the next get_config() reloads it."""
    global _config
    _config = None
