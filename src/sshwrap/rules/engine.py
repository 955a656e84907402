"""Rewrite engine: first-match rule search and template substitution.

The engine is pure: it never touches the filesystem, the network or the
environment. Its only side effect is DEBUG records on the module logger.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from sshwrap.rules.models import MatchResult, Rule, RuleSet

logger = logging.getLogger(__name__)


def match_rule(rule: Rule, host: str) -> Optional[MatchResult]:
    """Match *host* against the whole of *rule*'s pattern.

    Returns the captured groups (``None`` for groups that did not take part),
    or ``None`` when the host does not match. A pattern that fails to compile
    raises ``InvalidPatternError``.
    """
    logger.debug("Generated regex for pattern '%s': %s", rule.pattern, rule.anchored_pattern)
    m = rule.compiled_pattern.fullmatch(host)
    if m is None:
        logger.debug("Regex did not match for host: %s", host)
        return None
    groups: MatchResult = m.groups()
    logger.debug("Regex matched. Captured groups: %s", list(groups))
    return groups


def find_match(host: str, rules: RuleSet) -> Optional[Tuple[Rule, MatchResult]]:
    """Return the first rule (in configured order) matching *host* with its groups."""
    for rule in rules:
        logger.debug("Trying pattern: %s", rule.pattern)
        groups = match_rule(rule, host)
        if groups is not None:
            logger.debug("Matched pattern: %s", rule.pattern)
            return rule, groups
    return None


def participating(groups: MatchResult) -> List[str]:
    """Drop groups that did not take part in the match, keeping their order."""
    return [g for g in groups if g is not None]


def substitute(template: str, groups: MatchResult) -> str:
    """Fill ``{n}`` placeholders in *template* from *groups*.

    Indices are 1-based and count only participating groups: for
    ``(a)(b)?(c)`` matched against ``ac``, ``{2}`` is ``c``. Placeholders
    beyond the number of participating groups are left untouched.
    """
    result = template
    for i, group in enumerate(participating(groups), start=1):
        result = result.replace(f"{{{i}}}", group)
    return result


def rewrite(host: str, rules: RuleSet) -> Optional[str]:
    """Rewrite *host* with the first matching rule.

    Returns ``None`` when no rule matches, meaning the original host should
    be used as-is. An empty rule set never matches.
    """
    hit = find_match(host, rules)
    if hit is None:
        logger.debug("No matching pattern found for host: %s", host)
        return None
    rule, groups = hit
    rewritten = substitute(rule.template, groups)
    logger.debug("Transformed host: %s", rewritten)
    return rewritten
