"""Detection of leaf keys that no translation call references.

Individual unused keys are common and lower risk than whole unused blocks,
so the check only fails once more than :data:`UNUSED_KEY_THRESHOLD` keys
are unused. Below that the findings are reported as a warning.
"""

from __future__ import annotations

from collections.abc import Iterable, Set
from dataclasses import dataclass

from i18n_typesafe.document import TranslationDocument
from i18n_typesafe.keys import branch_prefixes, flatten_keys, parent_block
from i18n_typesafe.patterns import Predicate, compile_patterns
from i18n_typesafe.scanner import SourceScanner

UNUSED_KEY_THRESHOLD = 10


@dataclass(frozen=True)
class KeyReport:
    """Outcome of the unused-key check."""

    total: int
    unused: tuple[str, ...]
    ignored: tuple[str, ...]
    calls_found: int
    threshold: int = UNUSED_KEY_THRESHOLD

    @property
    def ok(self) -> bool:
        return len(self.unused) <= self.threshold

    @property
    def by_block(self) -> dict[str, list[str]]:
        """Unused keys grouped by their parent block (``""`` for root)."""
        groups: dict[str, list[str]] = {}
        for key in self.unused:
            groups.setdefault(parent_block(key), []).append(key)
        return groups


def detect_unused_keys(
    keys: Iterable[str],
    block_prefixes: Set[str],
    is_ignored: Predicate,
    evidence: Set[str],
    threshold: int = UNUSED_KEY_THRESHOLD,
) -> KeyReport:
    """Return the keys missing from the translation-call ``evidence``.

    Keys that are themselves a block prefix are skipped; a well-formed
    document never has any.
    """
    all_keys = sorted(set(keys))
    unused = [
        key
        for key in all_keys
        if key not in evidence and key not in block_prefixes and not is_ignored(key)
    ]
    return KeyReport(
        total=len(all_keys),
        unused=tuple(unused),
        ignored=tuple(key for key in all_keys if is_ignored(key)),
        calls_found=len(evidence),
        threshold=threshold,
    )


def validate_keys(
    doc: TranslationDocument,
    scanner: SourceScanner,
    ignore_patterns: Iterable[str] = (),
    threshold: int = UNUSED_KEY_THRESHOLD,
) -> KeyReport:
    """Check every leaf key of ``doc`` against the translation calls in source."""
    return detect_unused_keys(
        flatten_keys(doc),
        branch_prefixes(doc),
        compile_patterns(ignore_patterns),
        scanner.find_translation_calls(),
        threshold=threshold,
    )


__all__ = [
    "UNUSED_KEY_THRESHOLD",
    "KeyReport",
    "detect_unused_keys",
    "validate_keys",
]
