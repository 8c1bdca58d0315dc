"""Loading and classifying translation documents.

A translation document is the parsed JSON of one locale file: nested
objects whose leaves are strings (or ``null``). Every parsed JSON value is
classified into exactly one :data:`NodeKind` so traversal code branches on
the kind instead of probing Python types ad hoc.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal, Self

NodeKind = Literal["null", "string", "number", "bool", "array", "object"]

ERR_NOT_FOUND = "Translation file not found: {path}"
ERR_UNPARSABLE = "Could not parse translation file {path}: {detail}"
ERR_NOT_OBJECT = "top-level value must be an object"

TranslationDocument = Mapping[str, Any]


class DocumentError(RuntimeError):
    """Raised when a translation document cannot be loaded."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path

    @classmethod
    def missing(cls, path: Path) -> Self:
        return cls(ERR_NOT_FOUND.format(path=path), path)

    @classmethod
    def unparsable(cls, path: Path, detail: str) -> Self:
        return cls(ERR_UNPARSABLE.format(path=path, detail=detail), path)


def node_kind(value: Any) -> NodeKind:
    """Return the JSON kind of a parsed ``value``."""
    if value is None:
        return "null"
    # bool is a subclass of int, so it has to be checked first
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, str):
        return "string"
    if isinstance(value, int | float):
        return "number"
    if isinstance(value, list | tuple):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    msg = f"unsupported JSON value of type {type(value).__name__}"
    raise TypeError(msg)


def is_branch(value: Any) -> bool:
    """Return ``True`` when ``value`` is a nested object rather than a leaf."""
    return node_kind(value) == "object"


def parse_document(text: str, path: Path) -> TranslationDocument:
    """Parse ``text`` as a translation document read from ``path``."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DocumentError.unparsable(path, str(exc)) from exc
    if node_kind(data) != "object":
        raise DocumentError.unparsable(path, ERR_NOT_OBJECT)
    return data


def load_document(path: str | Path) -> TranslationDocument:
    """Read and parse the translation document at ``path``.

    Raises:
        DocumentError: If the file is missing, unreadable or not a JSON
            object.
    """
    p = Path(path)
    if not p.is_file():
        raise DocumentError.missing(p)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentError.unparsable(p, str(exc)) from exc
    return parse_document(text, p)


__all__ = [
    "DocumentError",
    "NodeKind",
    "TranslationDocument",
    "is_branch",
    "load_document",
    "node_kind",
    "parse_document",
]
