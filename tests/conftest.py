import json
import logging
from pathlib import Path

import pytest

from i18n_typesafe import config, utils

EN = {
    "nav": {"home": "Home", "about": "About"},
    "pricing": {
        "title": "Pricing",
        "plans": {"free": "Free", "pro": "Pro"},
    },
    "footer": {"copyright": "(c) Example"},
}


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


def write_json(path: Path, data: object) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep config discovery away from the real working and user directories."""
    monkeypatch.setattr(config, "USER_CONFIG_FILE", tmp_path / "user" / "config.json")
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def log_records():
    handler = _ListHandler()
    utils.configure_logging("DEBUG", handler)
    try:
        yield handler.records
    finally:
        utils.configure_logging()


@pytest.fixture
def locales_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "locales"
    write_json(directory / "en.json", EN)
    write_json(directory / "de.json", EN)
    return directory


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "src"
    directory.mkdir()
    return directory
