"""Configuration discovery, loading and merging.

Option values are resolved with the precedence
built-in defaults < configuration file < explicit command line flags.
The configuration file is JSON and uses the keys of :data:`DEFAULT_CONFIG`.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir

from i18n_typesafe.scanner import (
    DEFAULT_EXCLUDED_DIRS,
    DEFAULT_EXTENSIONS,
    ErrorCallback,
    SourceScanner,
)
from i18n_typesafe.utils import logger, parse_language_list

CONFIG_FILE_NAMES: tuple[str, ...] = (
    ".i18n-typesafe.json",
    "i18n-typesafe.config.json",
    ".i18next-typesafe.json",
    "i18next-typesafe.config.json",
)
# per-user fallback in the platform-specific config directory
USER_CONFIG_FILE = Path(user_config_dir("i18n_typesafe")) / "config.json"

DEFAULT_CONFIG: dict[str, Any] = {
    "input": "src/locales/en.json",
    "output": "src/types/i18n.generated.ts",
    "watch": False,
    "locales": "src/locales",
    "source": "src",
    "languages": ["en", "de"],
    "extensions": list(DEFAULT_EXTENSIONS),
    "excludeDirs": sorted(DEFAULT_EXCLUDED_DIRS),
    "validation": {"ignoreKeys": [], "ignoreBlocks": []},
}

ERR_NOT_OBJECT = "{path}: configuration must be a JSON object"
ERR_STRING_LIST = "configuration value {key!r} must be a list of strings"
ERR_STRING = "configuration value {key!r} must be a string"
ERR_MAPPING = "configuration value {key!r} must be an object"
ERR_BOOL = "configuration value {key!r} must be true or false"


class ConfigError(ValueError):
    """Raised when configuration values have the wrong shape."""


@dataclass(frozen=True)
class ValidationOptions:
    """Ignore patterns applied by the unused-key and unused-block checks."""

    ignore_keys: tuple[str, ...] = ()
    ignore_blocks: tuple[str, ...] = ()


@dataclass(frozen=True)
class Options:
    """Fully resolved options handed to the generators and validators."""

    input: Path
    output: Path
    locales: Path
    source: Path
    languages: tuple[str, ...]
    watch: bool = False
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    exclude_dirs: frozenset[str] = DEFAULT_EXCLUDED_DIRS
    validation: ValidationOptions = field(default_factory=ValidationOptions)

    @property
    def canonical_path(self) -> Path:
        """Path of the canonical locale inside :attr:`locales`."""
        return self.locales / self.input.name

    def scanner(self, on_error: ErrorCallback | None = None) -> SourceScanner:
        """Return a source scanner rooted at :attr:`source`."""
        return SourceScanner(
            root=self.source,
            extensions=self.extensions,
            exclude_dirs=self.exclude_dirs,
            on_error=on_error,
        )


def find_config_file(cwd: str | Path | None = None) -> Path | None:
    """Return the first existing configuration file, if any."""
    base = Path(cwd) if cwd is not None else Path.cwd()
    candidates = [base / name for name in CONFIG_FILE_NAMES]
    candidates.append(USER_CONFIG_FILE)
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


def load_config_at(path: Path) -> dict[str, Any]:
    """Load configuration from ``path``.

    An unreadable or unparsable file is logged and treated as empty.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Error loading config from %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning(ERR_NOT_OBJECT.format(path=path))
        return {}
    return data


def load_config(
    path: str | Path | None = None, cwd: str | Path | None = None
) -> dict[str, Any]:
    """Load the explicit config ``path`` or the first discovered one."""
    target = Path(path) if path is not None else find_config_file(cwd)
    if target is None:
        return {}
    logger.debug("Using configuration file %s", target)
    return load_config_at(target)


def _string(data: Mapping[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str | Path):
        raise ConfigError(ERR_STRING.format(key=key))
    return str(value)


def _string_list(value: Any, key: str) -> tuple[str, ...]:
    if isinstance(value, str) or not isinstance(value, Iterable):
        raise ConfigError(ERR_STRING_LIST.format(key=key))
    items = tuple(value)
    if not all(isinstance(item, str) for item in items):
        raise ConfigError(ERR_STRING_LIST.format(key=key))
    return items


def _boolean(value: Any, key: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(ERR_BOOL.format(key=key))
    return value


def _languages(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        return tuple(parse_language_list(value))
    return tuple(parse_language_list(_string_list(value, "languages")))


def _extensions(value: Any) -> tuple[str, ...]:
    def _normalise(ext: str) -> str:
        ext = ext.strip()
        return ext if ext.startswith(".") else f".{ext}"

    return tuple(_normalise(ext) for ext in _string_list(value, "extensions"))


def merge_options(
    config: Mapping[str, Any] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> Options:
    """Merge ``config`` and ``overrides`` over :data:`DEFAULT_CONFIG`.

    ``None`` values in ``overrides`` mean "not given" and never replace a
    configured value.
    """
    data = dict(DEFAULT_CONFIG)
    data.update(config or {})
    data.update({k: v for k, v in (overrides or {}).items() if v is not None})
    validation = data.get("validation") or {}
    if not isinstance(validation, Mapping):
        raise ConfigError(ERR_MAPPING.format(key="validation"))
    return Options(
        input=Path(_string(data, "input")),
        output=Path(_string(data, "output")),
        locales=Path(_string(data, "locales")),
        source=Path(_string(data, "source")),
        languages=_languages(data["languages"]),
        watch=_boolean(data.get("watch", False), "watch"),
        extensions=_extensions(data["extensions"]),
        exclude_dirs=frozenset(_string_list(data["excludeDirs"], "excludeDirs")),
        validation=ValidationOptions(
            ignore_keys=_string_list(
                validation.get("ignoreKeys") or (), "validation.ignoreKeys"
            ),
            ignore_blocks=_string_list(
                validation.get("ignoreBlocks") or (), "validation.ignoreBlocks"
            ),
        ),
    )


__all__ = [
    "CONFIG_FILE_NAMES",
    "DEFAULT_CONFIG",
    "USER_CONFIG_FILE",
    "ConfigError",
    "Options",
    "ValidationOptions",
    "find_config_file",
    "load_config",
    "load_config_at",
    "merge_options",
]
