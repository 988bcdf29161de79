"""Configuration loading for paramalign."""

from rules.config import (
    CONFIG_FILENAME,
    ConfigError,
    ParamAlignConfig,
    load_config,
)

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "ParamAlignConfig",
    "load_config",
]
