"""Glob-style ignore patterns for translation keys and blocks.

The pattern language is deliberately tiny: ``*`` matches any run of
characters (including none) and every other character matches itself.
Patterns are anchored at both ends, so ``legacy.*`` matches
``legacy.old.title`` but not ``app.legacy.title``.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable

Predicate = Callable[[str], bool]


def pattern_to_regex(pattern: str) -> re.Pattern[str]:
    """Return the regular expression for a single glob ``pattern``.

    The expression must be applied with :meth:`re.Pattern.fullmatch`.
    """
    body = ".*".join(re.escape(part) for part in pattern.split("*"))
    return re.compile(body, re.DOTALL)


def _never(_candidate: str) -> bool:
    return False


def compile_patterns(patterns: Iterable[str] | None) -> Predicate:
    """Compile ``patterns`` into a predicate over key or block strings.

    The predicate returns ``True`` when any pattern matches the whole
    candidate. An empty or missing pattern set never matches.
    """
    compiled = [pattern_to_regex(p) for p in patterns or ()]
    if not compiled:
        return _never

    def matches(candidate: str) -> bool:
        return any(regex.fullmatch(candidate) for regex in compiled)

    return matches


def matches_pattern(candidate: str, patterns: Iterable[str] | None) -> bool:
    """Return ``True`` if ``candidate`` matches any of ``patterns``."""
    return compile_patterns(patterns)(candidate)


__all__ = ["Predicate", "compile_patterns", "matches_pattern", "pattern_to_regex"]
