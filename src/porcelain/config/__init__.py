"""Configuration loading, schema, and defaults."""

from porcelain.config.loader import ConfigError, load_config
from porcelain.config.schema import OutputConfig, PorcelainConfig, StatusConfig

__all__ = [
    "ConfigError",
    "OutputConfig",
    "PorcelainConfig",
    "StatusConfig",
    "load_config",
]
