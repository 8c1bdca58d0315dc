"""Logging and small shared helpers for i18n-typesafe modules."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

# central logger for the project
logger = logging.getLogger("i18n_typesafe")
logger.propagate = False


def configure_logging(
    level: str = "INFO", handler: logging.Handler | None = None
) -> logging.Logger:
    """Configure and return the package logger."""
    numeric = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric)
    logger.handlers.clear()
    if handler is None:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)

    # forward warnings.warn() calls through the logging system
    # reinstall in case warnings.showwarning was replaced since the last call
    logging.captureWarnings(False)
    logging.captureWarnings(True)
    wlog = logging.getLogger("py.warnings")
    wlog.setLevel(numeric)
    wlog.handlers.clear()
    wlog.addHandler(handler)
    wlog.propagate = False
    return logger


# configure default logging on import
configure_logging()


def log_unreadable(path: Path, exc: OSError) -> None:
    """Report a directory or file the source scanner could not read."""
    logger.warning("Skipping unreadable path %s: %s", path, exc.strerror or exc)


def parse_language_list(value: str | Iterable[str] | None) -> list[str]:
    """Return language codes from a comma-separated string or iterable.

    Whitespace around codes is stripped, empty entries are dropped and the
    first occurrence of a duplicate wins.
    """
    if value is None:
        return []
    raw = value.split(",") if isinstance(value, str) else list(value)
    languages: list[str] = []
    for item in raw:
        code = str(item).strip()
        if code and code not in languages:
            languages.append(code)
    return languages


__all__ = [
    "configure_logging",
    "log_unreadable",
    "logger",
    "parse_language_list",
]
