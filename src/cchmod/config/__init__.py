"""Configuration loading, schema, and defaults."""

from cchmod.config.loader import ConfigError, load_config
from cchmod.config.schema import CChmodConfig, DiffConfig, OutputConfig

__all__ = [
    "CChmodConfig",
    "ConfigError",
    "DiffConfig",
    "OutputConfig",
    "load_config",
]
