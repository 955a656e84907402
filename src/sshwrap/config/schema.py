"""Configuration schema: dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class SSHConfig:
    binary: str = "ssh"  # client executable, looked up on PATH


@dataclass
class OutputConfig:
    debug: bool = False


@dataclass
class PatternConfig:
    """One ``[[patterns]]`` entry, before it is turned into a Rule."""

    pattern: str
    template: str


@dataclass
class WrapperConfig:
    version: str = "1.0"
    ssh: SSHConfig = field(default_factory=SSHConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    patterns: List[PatternConfig] = field(default_factory=list)
