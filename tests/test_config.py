import json
from pathlib import Path

import pytest

from i18n_typesafe import config as cfg


def test_merge_options_defaults():
    options = cfg.merge_options()
    assert options.input == Path("src/locales/en.json")
    assert options.output == Path("src/types/i18n.generated.ts")
    assert options.locales == Path("src/locales")
    assert options.source == Path("src")
    assert options.languages == ("en", "de")
    assert options.watch is False
    assert options.extensions == (".ts", ".tsx", ".js", ".jsx")
    assert options.exclude_dirs == {"node_modules", "dist", "build", ".git"}
    assert options.validation == cfg.ValidationOptions()


def test_precedence_defaults_config_flags():
    config = {"locales": "i18n", "source": "app", "languages": "en, fr"}
    options = cfg.merge_options(config, {"source": "web", "locales": None})
    assert options.locales == Path("i18n")
    assert options.source == Path("web")
    assert options.languages == ("en", "fr")


def test_validation_patterns_from_config():
    config = {"validation": {"ignoreKeys": ["legacy.*"], "ignoreBlocks": ["tmp"]}}
    options = cfg.merge_options(config)
    assert options.validation.ignore_keys == ("legacy.*",)
    assert options.validation.ignore_blocks == ("tmp",)


def test_extensions_are_normalised():
    options = cfg.merge_options({"extensions": ["vue", ".svelte"]})
    assert options.extensions == (".vue", ".svelte")


@pytest.mark.parametrize(
    "config",
    [
        {"languages": 3},
        {"validation": {"ignoreKeys": "legacy.*"}},
        {"validation": {"ignoreBlocks": [1]}},
        {"validation": ["a"]},
        {"input": 5},
        {"watch": "false"},
        {"watch": 1},
    ],
)
def test_invalid_values_raise(config):
    with pytest.raises(cfg.ConfigError):
        cfg.merge_options(config)


def test_canonical_path_uses_input_name():
    options = cfg.merge_options({"locales": "l10n", "input": "src/locales/fr.json"})
    assert options.canonical_path == Path("l10n/fr.json")


def test_scanner_from_options():
    options = cfg.merge_options({"source": "web", "excludeDirs": ["vendor"]})
    scanner = options.scanner()
    assert scanner.root == Path("web")
    assert scanner.exclude_dirs == {"vendor"}


def test_find_config_file_order(tmp_path):
    assert cfg.find_config_file(tmp_path) is None
    second = tmp_path / "i18n-typesafe.config.json"
    second.write_text("{}")
    assert cfg.find_config_file(tmp_path) == second
    first = tmp_path / ".i18n-typesafe.json"
    first.write_text("{}")
    assert cfg.find_config_file(tmp_path) == first


def test_find_config_file_user_fallback(tmp_path):
    cfg.USER_CONFIG_FILE.parent.mkdir(parents=True)
    cfg.USER_CONFIG_FILE.write_text("{}")
    assert cfg.find_config_file(tmp_path / "elsewhere") == cfg.USER_CONFIG_FILE


def test_load_config_discovers_in_cwd(tmp_path):
    (tmp_path / ".i18n-typesafe.json").write_text(json.dumps({"source": "app"}))
    assert cfg.load_config() == {"source": "app"}


def test_load_config_without_file():
    assert cfg.load_config() == {}


def test_load_config_at_invalid_json(tmp_path, log_records):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    assert cfg.load_config_at(path) == {}
    assert any("Error loading config" in r.getMessage() for r in log_records)


def test_load_config_at_requires_object(tmp_path, log_records):
    path = tmp_path / "list.json"
    path.write_text("[1, 2]")
    assert cfg.load_config_at(path) == {}
    assert log_records


def test_watch_flag_from_config():
    assert cfg.merge_options({"watch": True}).watch is True
    assert cfg.merge_options({"watch": True}, {"watch": None}).watch is True


def test_find_config_file_accepts_i18next_names(tmp_path):
    legacy = tmp_path / ".i18next-typesafe.json"
    legacy.write_text("{}")
    assert cfg.find_config_file(tmp_path) == legacy
    current = tmp_path / "i18n-typesafe.config.json"
    current.write_text("{}")
    assert cfg.find_config_file(tmp_path) == current


def test_load_config_reads_i18next_config_name(tmp_path):
    path = tmp_path / "i18next-typesafe.config.json"
    path.write_text(json.dumps({"source": "web"}))
    assert cfg.load_config() == {"source": "web"}
