import runpy

import pytest

from i18n_typesafe import cli


def test_package_run_calls_cli_main(monkeypatch):
    called = []
    monkeypatch.setattr(cli, "main", lambda: called.append(True) or 0)
    with pytest.raises(SystemExit) as info:
        runpy.run_module("i18n_typesafe", run_name="__main__")
    assert info.value.code == 0
    assert called
