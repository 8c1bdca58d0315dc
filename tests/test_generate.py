import threading

from conftest import EN, write_json

from i18n_typesafe import generate as gen
from i18n_typesafe.keys import flatten_keys


def test_render_type_file_layout():
    text = gen.render_type_file(["b.x", "a.y"])
    assert text == (
        "// AUTO-GENERATED - DO NOT EDIT\n"
        "// Generated from translation files\n"
        "// Total keys: 2\n"
        "\n"
        "export type TranslationKey =\n"
        "  | 'a.y'\n"
        "  | 'b.x';\n"
    )


def test_render_type_file_without_keys():
    text = gen.render_type_file([])
    assert "// Total keys: 0" in text
    assert text.endswith("export type TranslationKey = never;\n")
    assert gen.parse_generated_keys(text) == []


def test_generated_keys_round_trip(tmp_path):
    source = write_json(tmp_path / "en.json", EN)
    out = tmp_path / "types" / "nested" / "i18n.generated.ts"
    count = gen.generate(source, out)
    keys = gen.parse_generated_keys(out.read_text(encoding="utf-8"))
    assert keys == sorted(flatten_keys(EN))
    assert count == len(keys)


def test_quotes_in_keys_are_escaped():
    text = gen.render_type_file(["it's", "back\\slash"])
    assert "'it\\'s'" in text
    assert sorted(gen.parse_generated_keys(text)) == ["back\\slash", "it's"]


def test_regenerate_logs_missing_input(tmp_path, log_records):
    gen.regenerate(tmp_path / "missing.json", tmp_path / "out.ts")
    assert not (tmp_path / "out.ts").exists()
    assert any("Error generating types" in r.getMessage() for r in log_records)


def test_watch_regenerates_on_change(tmp_path, monkeypatch):
    source = write_json(tmp_path / "en.json", {"a": "1"})
    out = tmp_path / "out.ts"
    stop = threading.Event()
    mtimes = iter([1.0, 1.0, 2.0])
    calls = []

    def fake_mtime(_path):
        try:
            return next(mtimes)
        except StopIteration:
            stop.set()
            return 2.0

    def fake_regenerate(input_path, output):
        calls.append((input_path, output))

    monkeypatch.setattr(gen, "_mtime", fake_mtime)
    monkeypatch.setattr(gen, "regenerate", fake_regenerate)
    gen.watch(source, out, interval=0, stop=stop)
    assert calls == [(source, out)]


def test_watch_stops_immediately_when_stop_is_set(tmp_path, monkeypatch):
    stop = threading.Event()
    stop.set()
    calls = []
    monkeypatch.setattr(gen, "regenerate", lambda *args: calls.append(args))
    gen.watch(tmp_path / "en.json", tmp_path / "out.ts", interval=0, stop=stop)
    assert calls == []


def test_line_breaks_in_keys_are_escaped():
    text = gen.render_type_file(["multi\nline", "carriage\rreturn"])
    assert "'multi\\nline'" in text
    assert "'carriage\\rreturn'" in text
    assert sorted(gen.parse_generated_keys(text)) == ["carriage\rreturn", "multi\nline"]
