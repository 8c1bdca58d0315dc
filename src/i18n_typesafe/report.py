"""Plain-text rendering of validation reports."""

from __future__ import annotations

from collections.abc import Sequence

from i18n_typesafe.blocks import BlockReport
from i18n_typesafe.sync import PairDiff, SyncReport
from i18n_typesafe.unused_keys import KeyReport

MAX_SYNC_LISTED = 10
MAX_BLOCK_LISTED = 5
ROOT_BLOCK = "(root)"


def _truncated(items: Sequence[str], limit: int, indent: str) -> list[str]:
    lines = [f"{indent}- {item}" for item in items[:limit]]
    if len(items) > limit:
        lines.append(f"{indent}... and {len(items) - limit} more")
    return lines


def _render_pair(diff: PairDiff) -> list[str]:
    lines = [f"Mismatch between {diff.lang_a} and {diff.lang_b}:"]
    for lang, only in ((diff.lang_a, diff.only_in_a), (diff.lang_b, diff.only_in_b)):
        if only:
            lines.append(f"  Keys only in {lang}.json ({len(only)}):")
            lines.extend(_truncated(only, MAX_SYNC_LISTED, "    "))
    return lines


def render_sync(report: SyncReport) -> list[str]:
    """Return the report lines for a sync comparison."""
    if report.ok:
        first = report.languages[0]
        return [
            "All translation files are synchronized!",
            f"  Languages checked: {', '.join(report.languages)}",
            f"  Total keys: {report.key_counts[first]}",
        ]
    lines: list[str] = []
    for diff in report.mismatches:
        lines.extend(_render_pair(diff))
        lines.append("")
    lines.append("Translation files are out of sync")
    return lines


def render_blocks(report: BlockReport) -> list[str]:
    """Return the report lines for the unused-block check."""
    lines = [f"Found {len(report.blocks)} translation blocks"]
    if report.ignored:
        lines.append(f"Ignoring {len(report.ignored)} blocks (from config patterns)")
    if report.unused:
        lines.append(f"Found {len(report.unused)} unused translation blocks:")
        lines.extend(
            f"  - {block.prefix} ({block.key_count} keys)" for block in report.unused
        )
        lines.append(f"  Total unused keys: {report.unused_key_total}")
        lines.append(
            "Tip: add useTypedTranslation(prefixes("
            f"'{report.unused[0].prefix}')) to use this block"
        )
        return lines
    lines.append("All translation blocks are being used!")
    lines.append(f"  Blocks checked: {len(report.blocks)}")
    if report.ignored:
        lines.append(f"  Ignored blocks: {len(report.ignored)}")
    return lines


def render_keys(report: KeyReport) -> list[str]:
    """Return the report lines for the unused-key check."""
    lines = [
        f"Total translation keys: {report.total}",
        f"Found {report.calls_found} translation calls in code",
    ]
    if report.ignored:
        lines.append(f"Ignoring {len(report.ignored)} keys (from config patterns)")
    if not report.unused:
        lines.append("All translation keys are being used!")
        lines.append(f"  Keys checked: {report.total}")
        if report.ignored:
            lines.append(f"  Ignored keys: {len(report.ignored)}")
        return lines
    lines.append(f"Found {len(report.unused)} unused translation keys:")
    for block, keys in report.by_block.items():
        lines.append(f"  Block: {block or ROOT_BLOCK}")
        short = [key.rpartition(".")[2] for key in keys]
        lines.extend(_truncated(short, MAX_BLOCK_LISTED, "    "))
    lines.append("These keys exist in translations but aren't used in code")
    if report.ok:
        lines.append("Consider removing them or verify they're needed")
    else:
        lines.append(f"More than {report.threshold} unused keys, failing the check")
    return lines


__all__ = ["render_blocks", "render_keys", "render_sync"]
