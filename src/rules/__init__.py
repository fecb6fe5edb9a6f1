"""Configuration loading for classdeps."""

from rules.config import (
    CONFIG_FILENAME,
    ConfigError,
    ExplorerConfig,
    config_root,
    load_config,
)

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "ExplorerConfig",
    "config_root",
    "load_config",
]
