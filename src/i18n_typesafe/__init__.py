"""Type generation and consistency checks for JSON translation catalogs."""

from i18n_typesafe.keys import Block, extract_blocks, flatten_keys
from i18n_typesafe.patterns import compile_patterns, matches_pattern
from i18n_typesafe.utils import configure_logging, logger

__all__ = [
    "Block",
    "compile_patterns",
    "configure_logging",
    "extract_blocks",
    "flatten_keys",
    "logger",
    "matches_pattern",
]
