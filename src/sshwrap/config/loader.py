"""Load configuration from ~/.ssh/wrapper.toml, CLI flags, and env vars."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from sshwrap.config.defaults import CONFIG_RELPATH, ENV_CONFIG, ENV_DEBUG, ENV_SSH
from sshwrap.config.schema import OutputConfig, PatternConfig, SSHConfig, WrapperConfig


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def home_dir() -> Path:
    return Path(os.environ.get("HOME") or Path.home())


def default_config_path(home: Optional[Path] = None) -> Path:
    return (home or home_dir()) / CONFIG_RELPATH


def resolve_config_path(home: Optional[Path] = None, override: Optional[str] = None) -> Path:
    """Return the config path to use. *override* beats ``$SSHWRAP_CONFIG``."""
    if override:
        return Path(override).expanduser()
    if val := os.environ.get(ENV_CONFIG):
        return Path(val).expanduser()
    return default_config_path(home)


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    import dataclasses

    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in data.get(section, {}).items() if k in valid_fields}
    return cls(**filtered)


def parse_pattern_entry(entry: Any, where: str) -> PatternConfig:
    """Validate one pattern mapping. ``add`` is accepted for ``template``."""
    if not isinstance(entry, dict):
        raise ConfigError(f"{where}: expected a table with 'pattern' and 'template'")
    pattern = entry.get("pattern")
    if not isinstance(pattern, str):
        raise ConfigError(f"{where}: 'pattern' must be a string")
    template = entry.get("template", entry.get("add"))
    if not isinstance(template, str):
        raise ConfigError(f"{where}: 'template' must be a string")
    return PatternConfig(pattern=pattern, template=template)


def _build_patterns(raw: Dict[str, Any], path: Path) -> List[PatternConfig]:
    entries = raw.get("patterns", [])
    if not isinstance(entries, list):
        raise ConfigError(f"{path}: 'patterns' must be an array of tables")
    return [
        parse_pattern_entry(entry, f"{path}: patterns[{i}]")
        for i, entry in enumerate(entries)
    ]


def _check_types(cfg: WrapperConfig, path: Path) -> None:
    if not isinstance(cfg.ssh.binary, str):
        raise ConfigError(f"{path}: 'ssh.binary' must be a string")
    if not isinstance(cfg.output.debug, bool):
        raise ConfigError(f"{path}: 'output.debug' must be true or false")


def apply_env_overrides(cfg: WrapperConfig) -> None:
    """Apply SSHWRAP_* environment variable overrides."""
    if val := os.environ.get(ENV_SSH):
        cfg.ssh.binary = val
    if val := os.environ.get(ENV_DEBUG):
        if val.lower() in ("1", "true", "yes"):
            cfg.output.debug = True
        elif val.lower() in ("0", "false", "no"):
            cfg.output.debug = False


def load_config(
    home: Optional[Path] = None,
    config_override: Optional[str] = None,
) -> WrapperConfig:
    """Load, validate, and return a WrapperConfig.

    A missing default file yields the defaults; a missing explicit file
    (``--config`` or ``$SSHWRAP_CONFIG``) is a ConfigError.
    """
    config_path = resolve_config_path(home, config_override)
    explicit = bool(config_override or os.environ.get(ENV_CONFIG))

    if not config_path.is_file():
        if explicit:
            raise ConfigError(f"Config file not found: {config_path}")
        cfg = WrapperConfig()
    else:
        raw = _parse_toml(config_path)
        try:
            cfg = WrapperConfig(
                version=str(raw.get("version", "1.0")),
                ssh=_build_section(raw, SSHConfig, "ssh"),
                output=_build_section(raw, OutputConfig, "output"),
                patterns=_build_patterns(raw, config_path),
            )
        except (AttributeError, TypeError) as exc:
            raise ConfigError(f"Invalid config in {config_path}: {exc}") from exc
        _check_types(cfg, config_path)

    apply_env_overrides(cfg)
    return cfg
