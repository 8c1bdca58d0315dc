"""Translation key flattening and block extraction."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from i18n_typesafe.document import TranslationDocument, is_branch


@dataclass(frozen=True)
class Block:
    """A namespace whose direct children are all leaf values."""

    prefix: str
    key_count: int


def join_key(prefix: str, key: str) -> str:
    """Return ``key`` appended to ``prefix`` with a dot separator."""
    return f"{prefix}.{key}" if prefix else key


def parent_block(key: str) -> str:
    """Return the dotted prefix of ``key`` (empty for root-level keys)."""
    head, _, _ = key.rpartition(".")
    return head


def flatten_keys(doc: TranslationDocument, prefix: str = "") -> set[str]:
    """Return the dotted path of every leaf in ``doc``.

    Strings, numbers, booleans, ``null`` and arrays are leaves; only nested
    objects are descended into. An empty nested object contributes no keys.
    """
    keys: set[str] = set()
    for key, value in doc.items():
        full_key = join_key(prefix, key)
        if is_branch(value):
            keys |= flatten_keys(value, full_key)
        else:
            keys.add(full_key)
    return keys


def _iter_blocks(doc: TranslationDocument, prefix: str) -> Iterator[Block]:
    for key, value in doc.items():
        if not is_branch(value):
            continue
        full_key = join_key(prefix, key)
        children = list(value.values())
        if children and not any(is_branch(child) for child in children):
            yield Block(prefix=full_key, key_count=len(children))
        yield from _iter_blocks(value, full_key)


def extract_blocks(doc: TranslationDocument, prefix: str = "") -> list[Block]:
    """Return every leaf block of ``doc`` in document order.

    A node with a mix of leaf and object children is not a block itself,
    but its object children are still examined.
    """
    return list(_iter_blocks(doc, prefix))


def branch_prefixes(doc: TranslationDocument, prefix: str = "") -> set[str]:
    """Return the path of every nested object in ``doc``, blocks included."""
    prefixes: set[str] = set()
    for key, value in doc.items():
        if is_branch(value):
            full_key = join_key(prefix, key)
            prefixes.add(full_key)
            prefixes |= branch_prefixes(value, full_key)
    return prefixes


__all__ = [
    "Block",
    "branch_prefixes",
    "extract_blocks",
    "flatten_keys",
    "join_key",
    "parent_block",
]
