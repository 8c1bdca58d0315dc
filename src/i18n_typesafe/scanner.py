"""Heuristic scanning of application source files for translation usage.

The scanner does not parse the source language. It looks for textual
evidence of probable usage:

* translation calls such as ``t('nav.home')`` or ``tPricing("title")``,
  whose first string-literal argument is collected as a used key;
* block prefixes, either declared through ``prefixes('nav.home', ...)`` or
  appearing anywhere as a quoted string literal.

Matches inside comments or unrelated strings are counted too. Directories
that cannot be listed are skipped and reported through ``on_error``.
"""

from __future__ import annotations

import os
import re
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_EXTENSIONS: tuple[str, ...] = (".ts", ".tsx", ".js", ".jsx")
DEFAULT_EXCLUDED_DIRS: frozenset[str] = frozenset(
    {"node_modules", "dist", "build", ".git"}
)

# ``t(`` or ``t`` followed by an upper-case letter, e.g. ``tPricing(``
TRANSLATION_CALL_RE = re.compile(r"""\b(?:t|t[A-Z]\w*)\(\s*['"`]([^'"`]+)['"`]""")

_QUOTE = "['\"`]"

ErrorCallback = Callable[[Path, OSError], None]


def prefix_patterns(prefix: str) -> tuple[re.Pattern[str], ...]:
    """Return the expressions that count as usage of block ``prefix``."""
    literal = f"{_QUOTE}{re.escape(prefix)}{_QUOTE}"
    return (
        re.compile(rf"prefixes\([^)]*{literal}[^)]*\)"),
        # legacy usage passing the prefix string directly
        re.compile(literal),
    )


def find_translation_calls(text: str) -> set[str]:
    """Return the key literals passed to translation calls in ``text``."""
    return set(TRANSLATION_CALL_RE.findall(text))


def text_uses_prefix(text: str, prefix: str) -> bool:
    """Return ``True`` when ``text`` shows usage of block ``prefix``."""
    return any(p.search(text) for p in prefix_patterns(prefix))


@dataclass(frozen=True)
class SourceScanner:
    """Walk a source tree and read files with an allowed extension."""

    root: Path
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    exclude_dirs: frozenset[str] = DEFAULT_EXCLUDED_DIRS
    on_error: ErrorCallback | None = field(default=None, compare=False)

    def _report(self, path: Path, exc: OSError) -> None:
        if self.on_error is not None:
            self.on_error(path, exc)

    def _walk(self, directory: Path) -> Iterator[Path]:
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as exc:
            self._report(directory, exc)
            return
        for entry in entries:
            path = Path(entry.path)
            if entry.is_dir(follow_symlinks=False):
                if entry.name in self.exclude_dirs:
                    continue
                yield from self._walk(path)
            elif entry.is_file(follow_symlinks=False) and entry.name.endswith(
                self.extensions
            ):
                yield path

    def iter_files(self) -> Iterator[Path]:
        """Yield source files below :attr:`root` in a stable order."""
        yield from self._walk(Path(self.root))

    def iter_sources(self) -> Iterator[tuple[Path, str]]:
        """Yield ``(path, text)`` for every readable source file."""
        for path in self.iter_files():
            try:
                text = path.read_text(encoding="utf-8", errors="ignore")
            except OSError as exc:
                self._report(path, exc)
                continue
            yield path, text

    def find_translation_calls(self) -> set[str]:
        """Return the distinct keys passed to translation calls in the tree."""
        found: set[str] = set()
        for _path, text in self.iter_sources():
            found |= find_translation_calls(text)
        return found

    def prefix_is_used(self, prefix: str) -> bool:
        """Return ``True`` if any source file shows usage of ``prefix``."""
        return any(text_uses_prefix(text, prefix) for _p, text in self.iter_sources())

    def used_prefixes(self, prefixes: Iterable[str]) -> set[str]:
        """Return the subset of ``prefixes`` used anywhere in the tree.

        The tree is walked once; the walk stops early when every prefix has
        been found.
        """
        remaining = {prefix: prefix_patterns(prefix) for prefix in prefixes}
        used: set[str] = set()
        if not remaining:
            return used
        for _path, text in self.iter_sources():
            hits = [
                prefix
                for prefix, patterns in remaining.items()
                if any(p.search(text) for p in patterns)
            ]
            for prefix in hits:
                used.add(prefix)
                del remaining[prefix]
            if not remaining:
                break
        return used


__all__ = [
    "DEFAULT_EXCLUDED_DIRS",
    "DEFAULT_EXTENSIONS",
    "TRANSLATION_CALL_RE",
    "ErrorCallback",
    "SourceScanner",
    "find_translation_calls",
    "prefix_patterns",
    "text_uses_prefix",
]
