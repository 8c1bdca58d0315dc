"""Command line interface for generating and validating translation keys."""

from __future__ import annotations

import argparse
import sys
import typing as t
from pathlib import Path
from typing import Self

from i18n_typesafe.config import ConfigError, Options, load_config, merge_options
from i18n_typesafe.document import DocumentError
from i18n_typesafe.generate import generate, regenerate, watch
from i18n_typesafe.utils import configure_logging, logger, parse_language_list
from i18n_typesafe.validate import CHECK_ORDER, run_check

_Handler = t.Callable[[Options], int]

_RULE = "-" * 60


class CliError(RuntimeError):
    """Raised when CLI arguments cannot be processed."""

    @classmethod
    def unrecognized_arguments(cls, extra: t.Sequence[str]) -> Self:
        joined = " ".join(extra)
        return cls(f"unrecognized arguments: {joined}")

    @classmethod
    def unsupported_command(cls, command: str) -> Self:
        return cls(f"unsupported command: {command}")

    @classmethod
    def missing_config(cls, path: str) -> Self:
        return cls(f"config file not found: {path}")

    @classmethod
    def invalid_languages(cls, value: str) -> Self:
        return cls(f"expected comma-separated language codes, got {value!r}")


def main(argv: t.Sequence[str] | None = None) -> int:
    """Parse *argv* and dispatch the requested command."""
    parser = _create_parser()
    try:
        args, extra = parser.parse_known_args(argv)
    except SystemExit as exc:  # pragma: no cover - argparse handles usage exits
        code = exc.code
        return code if isinstance(code, int) else 1

    configure_logging(args.log_level)
    try:
        if extra:
            raise CliError.unrecognized_arguments(extra)
        handler = _resolve_handler(args.command)
        options = _resolve_options(args)
        return handler(options)
    except (CliError, ConfigError) as exc:
        _write_line(sys.stderr, str(exc))
        return 2
    except DocumentError as exc:
        logger.error("%s", exc)
        return 1


def _resolve_handler(command: str) -> _Handler:
    handlers: dict[str, _Handler] = {
        "generate": _handle_generate,
        "validate": _handle_validate,
        "validate:sync": _check_handler("sync"),
        "validate:blocks": _check_handler("blocks"),
        "validate:keys": _check_handler("keys"),
    }
    try:
        return handlers[command]
    except KeyError as exc:
        raise CliError.unsupported_command(command) from exc


def _resolve_options(args: argparse.Namespace) -> Options:
    if args.config is not None and not Path(args.config).is_file():
        raise CliError.missing_config(args.config)
    config = load_config(args.config)
    overrides: dict[str, t.Any] = {
        name: getattr(args, name, None)
        for name in ("input", "output", "watch", "locales", "source")
    }
    raw_languages = getattr(args, "languages", None)
    if raw_languages is not None:
        languages = parse_language_list(raw_languages)
        if not languages:
            raise CliError.invalid_languages(raw_languages)
        overrides["languages"] = languages
    return merge_options(config, overrides)


def _handle_generate(options: Options) -> int:
    if options.watch:
        regenerate(options.input, options.output)
        try:
            watch(options.input, options.output)
        except KeyboardInterrupt:
            logger.info("Stopped watching %s", options.input)
        return 0
    try:
        count = generate(options.input, options.output)
    except OSError as exc:
        logger.error("Error generating types: %s", exc)
        return 1
    _write_line(sys.stdout, f"Generated {count} translation keys to {options.output}")
    return 0


def _check_handler(name: str) -> _Handler:
    def handle(options: Options) -> int:
        result = run_check(name, options)
        _write_lines(sys.stdout, result.lines)
        return 0 if result.ok else 1

    return handle


def _handle_validate(options: Options) -> int:
    lines = ["Running all i18n validations...", _RULE]
    _write_lines(sys.stdout, lines)
    ok = True
    total = len(CHECK_ORDER)
    for index, name in enumerate(CHECK_ORDER, start=1):
        result = run_check(name, options)
        _write_lines(
            sys.stdout,
            [f"Step {index}/{total}: {result.title}", _RULE, *result.lines],
        )
        if not result.ok:
            ok = False
            _write_line(sys.stdout, f"{result.title}: check failed")
    _write_line(sys.stdout, _RULE)
    if ok:
        _write_line(sys.stdout, "All validations passed!")
        return 0
    _write_lines(
        sys.stdout,
        ["Validation completed with errors", "Fix the issues above and run again"],
    )
    return 1


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-c",
        "--config",
        help="Configuration file (default: discovered in the working directory).",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level for diagnostics written to stderr.",
    )


def _add_validate_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-l", "--locales", help="Directory containing <lang>.json files."
    )
    parser.add_argument("-s", "--source", help="Source directory to scan for usage.")
    parser.add_argument(
        "-i",
        "--input",
        help="Canonical locale file; its file name is looked up in --locales.",
    )
    parser.add_argument(
        "--languages",
        help="Comma-separated language codes to compare, e.g. en,de,fr.",
    )


def _create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="i18n-typesafe",
        description="Generate translation key types and validate locale files.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate the TranslationKey type from the canonical locale.",
    )
    _add_common_options(generate_parser)
    generate_parser.add_argument("-i", "--input", help="Input JSON file path.")
    generate_parser.add_argument("-o", "--output", help="Output TypeScript file path.")
    generate_parser.add_argument(
        "-w",
        "--watch",
        action="store_true",
        default=None,
        help="Regenerate whenever the input file changes.",
    )

    commands = {
        "validate": "Run the sync, block and key checks.",
        "validate:sync": "Check that every language has the same keys.",
        "validate:blocks": "Report translation blocks unused in source.",
        "validate:keys": "Report translation keys unused in source.",
    }
    for command, help_text in commands.items():
        sub = subparsers.add_parser(command, help=help_text, description=help_text)
        _add_common_options(sub)
        _add_validate_options(sub)

    return parser


def _write_line(stream: t.TextIO, text: str) -> None:
    stream.write(f"{text}\n")


def _write_lines(stream: t.TextIO, lines: t.Iterable[str]) -> None:
    collected = list(lines)
    if not collected:
        return
    stream.write("\n".join(collected) + "\n")


__all__ = ["CliError", "main"]
