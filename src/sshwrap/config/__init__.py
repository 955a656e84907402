"""Configuration loading, schema, and defaults."""

from sshwrap.config.loader import ConfigError, load_config, resolve_config_path
from sshwrap.config.schema import PatternConfig, WrapperConfig

__all__ = [
    "ConfigError",
    "PatternConfig",
    "WrapperConfig",
    "load_config",
    "resolve_config_path",
]
