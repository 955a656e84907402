"""Rule data model: pattern stored as string, compiled on first use."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

# Captured groups in declaration order, group 0 excluded.
# ``None`` marks an optional group that did not participate in the match.
MatchResult = Tuple[Optional[str], ...]


class InvalidPatternError(Exception):
    """Raised when a rule's pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str, source: Optional[str] = None) -> None:
        self.pattern = pattern
        self.reason = reason
        self.source = source
        where = f" ({source})" if source else ""
        super().__init__(f"Invalid regex pattern '{pattern}'{where}: {reason}")


@dataclass
class Rule:
    """A single host rewrite rule.

    ``pattern`` is kept as the raw source so the rule stays printable and
    comparable. It always matches against the *whole* host; the compiled
    regex is built lazily via ``compiled_pattern`` and cached.
    """

    pattern: str
    template: str
    source: Optional[str] = None  # e.g. '~/.ssh/wrapper.toml' or a drop-in file

    _compiled_pattern: Optional[re.Pattern[str]] = field(
        default=None, init=False, repr=False, compare=False
    )

    @property
    def compiled_pattern(self) -> re.Pattern[str]:
        if self._compiled_pattern is None:
            try:
                self._compiled_pattern = re.compile(self.pattern)
            except re.error as exc:
                raise InvalidPatternError(self.pattern, str(exc), self.source) from exc
        return self._compiled_pattern

    @property
    def anchored_pattern(self) -> str:
        """Display form of the pattern with its implicit anchoring spelled out."""
        return f"^(?:{self.pattern})$"


RuleSet = Sequence[Rule]
