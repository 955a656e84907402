"""Rule set loading: config patterns plus YAML drop-in rule files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import yaml

from sshwrap.config.loader import ConfigError, parse_pattern_entry
from sshwrap.config.schema import WrapperConfig
from sshwrap.rules.models import Rule

logger = logging.getLogger(__name__)


def load_dropin_rules(directory: Path) -> List[Rule]:
    """Load rules from ``*.yaml`` / ``*.yml`` files in *directory*.

    Files are read in name order; each holds one mapping or a list of them.
    A missing directory yields no rules.
    """
    rules: List[Rule] = []
    if not directory.is_dir():
        return rules
    for path in sorted(directory.iterdir()):
        if path.suffix not in (".yaml", ".yml") or not path.is_file():
            continue
        rules.extend(_load_yaml_rules(path))
    return rules


def _load_yaml_rules(path: Path) -> List[Rule]:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc
    if data is None:
        return []
    if not isinstance(data, list):
        data = [data]
    rules = []
    for i, entry in enumerate(data):
        entry_cfg = parse_pattern_entry(entry, f"{path}: entry {i}")
        rules.append(Rule(pattern=entry_cfg.pattern, template=entry_cfg.template, source=str(path)))
    logger.debug("Loaded %d rule(s) from %s", len(rules), path)
    return rules


def build_ruleset(
    config: WrapperConfig,
    rules_dir: Optional[Path] = None,
    *,
    source: Optional[str] = None,
) -> List[Rule]:
    """Create the ordered rule set: config patterns first, then drop-ins.

    Every pattern is compiled here so that a malformed rule anywhere in the
    set raises ``InvalidPatternError`` before any host is rewritten.
    """
    rules = [
        Rule(pattern=p.pattern, template=p.template, source=source)
        for p in config.patterns
    ]
    if rules_dir is not None:
        rules.extend(load_dropin_rules(rules_dir))

    # Force-compile patterns now (not while searching)
    for rule in rules:
        _ = rule.compiled_pattern

    logger.debug("Rules loaded: %d", len(rules))
    return rules
