"""Running the sync, block and key checks from resolved options."""

from __future__ import annotations

import typing as t
from dataclasses import dataclass

from i18n_typesafe.blocks import BlockReport, validate_blocks
from i18n_typesafe.config import Options
from i18n_typesafe.document import DocumentError, load_document
from i18n_typesafe.report import render_blocks, render_keys, render_sync
from i18n_typesafe.sync import SyncError, SyncReport, validate_sync
from i18n_typesafe.unused_keys import KeyReport, validate_keys
from i18n_typesafe.utils import log_unreadable, logger

CHECK_ORDER: tuple[str, ...] = ("sync", "blocks", "keys")


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one check, rendered for the console."""

    name: str
    title: str
    ok: bool
    lines: tuple[str, ...]
    error: str | None = None


def run_sync(options: Options) -> SyncReport:
    return validate_sync(options.locales, options.languages)


def run_blocks(options: Options) -> BlockReport:
    doc = load_document(options.canonical_path)
    return validate_blocks(
        doc,
        options.scanner(on_error=log_unreadable),
        options.validation.ignore_blocks,
    )


def run_keys(options: Options) -> KeyReport:
    doc = load_document(options.canonical_path)
    return validate_keys(
        doc,
        options.scanner(on_error=log_unreadable),
        options.validation.ignore_keys,
    )


_Runner = t.Callable[[Options], t.Any]
_Renderer = t.Callable[[t.Any], list[str]]

_CHECKS: dict[str, tuple[str, _Runner, _Renderer]] = {
    "sync": ("Cross-language synchronization", run_sync, render_sync),
    "blocks": ("Unused translation blocks", run_blocks, render_blocks),
    "keys": ("Unused translation keys", run_keys, render_keys),
}


def run_check(name: str, options: Options) -> CheckResult:
    """Run the check called ``name``.

    Fatal document and sync errors are logged and turned into a failed
    result instead of propagating.
    """
    title, runner, renderer = _CHECKS[name]
    try:
        report = runner(options)
    except (DocumentError, SyncError) as exc:
        logger.error("%s", exc)
        return CheckResult(name=name, title=title, ok=False, lines=(), error=str(exc))
    return CheckResult(
        name=name, title=title, ok=report.ok, lines=tuple(renderer(report))
    )


def run_all(options: Options) -> list[CheckResult]:
    """Run every check in order; a failing check does not stop the others."""
    return [run_check(name, options) for name in CHECK_ORDER]


__all__ = [
    "CHECK_ORDER",
    "CheckResult",
    "run_all",
    "run_blocks",
    "run_check",
    "run_keys",
    "run_sync",
]
