"""Cross-language key synchronisation checks."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Set
from dataclasses import dataclass, field
from itertools import combinations
from pathlib import Path
from typing import Self

from i18n_typesafe.document import DocumentError, load_document
from i18n_typesafe.keys import flatten_keys
from i18n_typesafe.utils import logger

MIN_LANGUAGES = 2

ERR_NOT_ENOUGH = "Need at least {needed} translation files to compare, loaded {count}"


class SyncError(RuntimeError):
    """Raised when a sync comparison cannot be performed."""

    @classmethod
    def not_enough_languages(cls, loaded: Iterable[str]) -> Self:
        count = len(list(loaded))
        return cls(ERR_NOT_ENOUGH.format(needed=MIN_LANGUAGES, count=count))


@dataclass(frozen=True)
class PairDiff:
    """Keys present in only one of two languages."""

    lang_a: str
    lang_b: str
    only_in_a: tuple[str, ...]
    only_in_b: tuple[str, ...]

    @property
    def ok(self) -> bool:
        return not self.only_in_a and not self.only_in_b


@dataclass(frozen=True)
class SyncReport:
    """Result of comparing the key sets of every language pair."""

    languages: tuple[str, ...]
    pairs: dict[tuple[str, str], PairDiff]
    key_counts: dict[str, int]
    dropped: tuple[str, ...] = field(default=())

    @property
    def ok(self) -> bool:
        return all(diff.ok for diff in self.pairs.values())

    @property
    def mismatches(self) -> list[PairDiff]:
        return [diff for diff in self.pairs.values() if not diff.ok]


def compare_sync(
    keysets: Mapping[str, Set[str]], dropped: Iterable[str] = ()
) -> SyncReport:
    """Compare the key sets of every unordered pair of languages.

    Languages are paired in the order given by ``keysets``.

    Raises:
        SyncError: If fewer than two key sets are supplied.
    """
    if len(keysets) < MIN_LANGUAGES:
        raise SyncError.not_enough_languages(keysets)
    pairs: dict[tuple[str, str], PairDiff] = {}
    for lang_a, lang_b in combinations(keysets, 2):
        keys_a = keysets[lang_a]
        keys_b = keysets[lang_b]
        pairs[(lang_a, lang_b)] = PairDiff(
            lang_a=lang_a,
            lang_b=lang_b,
            only_in_a=tuple(sorted(keys_a - keys_b)),
            only_in_b=tuple(sorted(keys_b - keys_a)),
        )
    return SyncReport(
        languages=tuple(keysets),
        pairs=pairs,
        key_counts={lang: len(keys) for lang, keys in keysets.items()},
        dropped=tuple(dropped),
    )


def load_language_keysets(
    locales_dir: str | Path, languages: Iterable[str]
) -> tuple[dict[str, set[str]], list[str]]:
    """Load ``<locales_dir>/<lang>.json`` for every language.

    Missing or unparsable files are logged and skipped.

    Returns:
        The key set per loaded language and the codes that were dropped.
    """
    keysets: dict[str, set[str]] = {}
    dropped: list[str] = []
    for lang in languages:
        path = Path(locales_dir) / f"{lang}.json"
        try:
            doc = load_document(path)
        except DocumentError as exc:
            logger.warning("%s", exc)
            dropped.append(lang)
            continue
        keysets[lang] = flatten_keys(doc)
    return keysets, dropped


def validate_sync(locales_dir: str | Path, languages: Iterable[str]) -> SyncReport:
    """Load the locale files of ``languages`` and compare their keys."""
    keysets, dropped = load_language_keysets(locales_dir, languages)
    return compare_sync(keysets, dropped)


__all__ = [
    "MIN_LANGUAGES",
    "PairDiff",
    "SyncError",
    "SyncReport",
    "compare_sync",
    "load_language_keysets",
    "validate_sync",
]
