"""Generation of the ``TranslationKey`` literal-union type file."""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path
from threading import Event

from i18n_typesafe.document import DocumentError, load_document
from i18n_typesafe.keys import flatten_keys
from i18n_typesafe.utils import logger

WATCH_INTERVAL = 1.0

HEADER = (
    "// AUTO-GENERATED - DO NOT EDIT\n"
    "// Generated from translation files\n"
    "// Total keys: {count}\n"
)

_MEMBER_RE = re.compile(r"^\s*\|\s*'((?:[^'\\]|\\.)*)'", re.MULTILINE)
_ESCAPE_RE = re.compile(r"\\(.)")
_ESCAPES = {"\\": "\\\\", "'": "\\'", "\n": "\\n", "\r": "\\r"}
_UNESCAPES = {"n": "\n", "r": "\r"}


def _quote(key: str) -> str:
    return "'" + "".join(_ESCAPES.get(char, char) for char in key) + "'"


def _unescape(match: re.Match[str]) -> str:
    char = match.group(1)
    return _UNESCAPES.get(char, char)


def render_type_file(keys: Iterable[str]) -> str:
    """Return the TypeScript source declaring every key in sorted order."""
    sorted_keys = sorted(set(keys))
    lines = [HEADER.format(count=len(sorted_keys)), "export type TranslationKey ="]
    if sorted_keys:
        lines.extend(f"  | {_quote(key)}" for key in sorted_keys)
        lines[-1] += ";"
    else:
        lines[-1] += " never;"
    return "\n".join(lines) + "\n"


def parse_generated_keys(text: str) -> list[str]:
    """Return the keys listed in a generated type file, in file order."""
    return [_ESCAPE_RE.sub(_unescape, match) for match in _MEMBER_RE.findall(text)]


def write_type_file(keys: Iterable[str], output: str | Path) -> int:
    """Write the type file for ``keys`` to ``output`` and return the key count.

    The parent directory is created when missing.
    """
    out = Path(output)
    unique = set(keys)
    content = render_type_file(unique)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(content, encoding="utf-8")
    return len(unique)


def generate(input_path: str | Path, output: str | Path) -> int:
    """Generate the type file for the canonical locale at ``input_path``.

    Raises:
        DocumentError: If the input file is missing or not valid JSON.
    """
    keys = flatten_keys(load_document(input_path))
    return write_type_file(keys, output)


def _mtime(path: Path) -> float | None:
    try:
        return path.stat().st_mtime
    except OSError:
        return None


def regenerate(input_path: str | Path, output: str | Path) -> None:
    """Generate the type file, logging failures instead of raising."""
    try:
        count = generate(input_path, output)
    except (DocumentError, OSError) as exc:
        logger.error("Error generating types: %s", exc)
        return
    logger.info("Generated %d translation keys to %s", count, output)


def watch(
    input_path: str | Path,
    output: str | Path,
    *,
    interval: float = WATCH_INTERVAL,
    stop: Event | None = None,
) -> None:
    """Regenerate ``output`` whenever the modification time of the input changes.

    Polls every ``interval`` seconds until ``stop`` is set. Generation errors
    are logged and watching continues.
    """
    src = Path(input_path)
    out = Path(output)
    stop = stop or Event()
    logger.info("Watching %s for changes...", src)
    last = _mtime(src)
    while not stop.wait(interval):
        current = _mtime(src)
        if current == last:
            continue
        last = current
        logger.info("File changed, regenerating types...")
        regenerate(src, out)


__all__ = [
    "WATCH_INTERVAL",
    "generate",
    "parse_generated_keys",
    "regenerate",
    "render_type_file",
    "watch",
    "write_type_file",
]
