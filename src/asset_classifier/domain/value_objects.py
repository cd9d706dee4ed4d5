"""Value objects — self-validating domain primitives."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

from asset_classifier.domain.entities import UNKNOWN
from asset_classifier.domain.exceptions import RuleTableError


@dataclass(frozen=True, slots=True)
class PatternRule:
    """One label with the patterns that select it."""

    label: str
    patterns: tuple[re.Pattern[str], ...]

    def matches(self, text: str) -> bool:
        return any(pattern.search(text) for pattern in self.patterns)


@dataclass(frozen=True, slots=True)
class RuleTable:
    """Ordered, read-only set of labelled pattern rules.

    Rules are tried in declaration order and the first label whose pattern
    set matches wins.  Order is priority: an ambiguous name that satisfies
    two labels always resolves to the one declared first.
    """

    rules: tuple[PatternRule, ...]
    fallback: str = UNKNOWN

    @classmethod
    def from_patterns(
        cls,
        table: Sequence[tuple[str, Sequence[str]]],
        fallback: str = UNKNOWN,
    ) -> RuleTable:
        """Compile ``[(label, [regex, ...]), ...]`` into a rule table.

        Every pattern is compiled case-insensitive.  Raises
        :class:`RuleTableError` on empty or duplicate labels and on
        patterns that do not compile.
        """
        seen: set[str] = set()
        rules: list[PatternRule] = []
        for label, patterns in table:
            if not label:
                raise RuleTableError("Rule label must not be empty.")
            if label in seen:
                raise RuleTableError(f"Duplicate rule label: '{label}'.")
            seen.add(label)
            try:
                compiled = tuple(re.compile(p, re.IGNORECASE) for p in patterns)
            except re.error as exc:
                raise RuleTableError(f"Invalid pattern for '{label}': {exc}") from exc
            rules.append(PatternRule(label=label, patterns=compiled))
        return cls(rules=tuple(rules), fallback=fallback)

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(rule.label for rule in self.rules)

    def first_match(self, text: str) -> str | None:
        """Return the first matching label, or *None* when no rule matches."""
        for rule in self.rules:
            if rule.matches(text):
                return rule.label
        return None

    def classify(self, text: str) -> str:
        """Return the first matching label, or the table's fallback."""
        label = self.first_match(text)
        return label if label is not None else self.fallback
