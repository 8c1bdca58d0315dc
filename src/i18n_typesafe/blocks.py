"""Detection of translation blocks that no source file references."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from i18n_typesafe.document import TranslationDocument
from i18n_typesafe.keys import Block, extract_blocks
from i18n_typesafe.patterns import Predicate, compile_patterns
from i18n_typesafe.scanner import SourceScanner


@dataclass(frozen=True)
class BlockReport:
    """Blocks partitioned into ignored, used and unused."""

    blocks: tuple[Block, ...]
    used: tuple[Block, ...]
    unused: tuple[Block, ...]
    ignored: tuple[Block, ...]

    @property
    def ok(self) -> bool:
        """Any unused block fails the check."""
        return not self.unused

    @property
    def unused_key_total(self) -> int:
        return sum(block.key_count for block in self.unused)


def detect_unused_blocks(
    blocks: Iterable[Block], is_ignored: Predicate, scanner: SourceScanner
) -> BlockReport:
    """Classify ``blocks`` by whether the source tree references them.

    Ignored blocks are never looked up in the source tree.
    """
    all_blocks = tuple(blocks)
    ignored = tuple(block for block in all_blocks if is_ignored(block.prefix))
    candidates = [block for block in all_blocks if not is_ignored(block.prefix)]
    used_prefixes = scanner.used_prefixes(block.prefix for block in candidates)
    return BlockReport(
        blocks=all_blocks,
        used=tuple(b for b in candidates if b.prefix in used_prefixes),
        unused=tuple(b for b in candidates if b.prefix not in used_prefixes),
        ignored=ignored,
    )


def validate_blocks(
    doc: TranslationDocument,
    scanner: SourceScanner,
    ignore_patterns: Iterable[str] = (),
) -> BlockReport:
    """Check every leaf block of ``doc`` for usage under the scanner root."""
    return detect_unused_blocks(
        extract_blocks(doc), compile_patterns(ignore_patterns), scanner
    )


__all__ = ["BlockReport", "detect_unused_blocks", "validate_blocks"]
