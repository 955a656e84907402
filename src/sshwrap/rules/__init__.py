"""Rule engine: models, rewrite engine, rule set loading."""

from sshwrap.rules.engine import find_match, match_rule, rewrite, substitute
from sshwrap.rules.models import InvalidPatternError, MatchResult, Rule, RuleSet
from sshwrap.rules.registry import build_ruleset, load_dropin_rules

__all__ = [
    "InvalidPatternError",
    "MatchResult",
    "Rule",
    "RuleSet",
    "build_ruleset",
    "find_match",
    "load_dropin_rules",
    "match_rule",
    "rewrite",
    "substitute",
]
