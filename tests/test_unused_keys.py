from conftest import EN

from i18n_typesafe.patterns import compile_patterns
from i18n_typesafe.scanner import SourceScanner
from i18n_typesafe.unused_keys import (
    UNUSED_KEY_THRESHOLD,
    detect_unused_keys,
    validate_keys,
)

_NO_IGNORE = compile_patterns([])


def _keys(count: int) -> list[str]:
    return [f"block.key{i:02d}" for i in range(count)]


def test_more_than_threshold_unused_keys_fail():
    report = detect_unused_keys(_keys(11), set(), _NO_IGNORE, set())
    assert len(report.unused) == 11
    assert not report.ok


def test_threshold_unused_keys_only_warn():
    report = detect_unused_keys(_keys(UNUSED_KEY_THRESHOLD), set(), _NO_IGNORE, set())
    assert len(report.unused) == 10
    assert report.ok


def test_used_ignored_and_prefix_keys_are_excluded():
    keys = ["a.used", "a.ignored", "a.prefix", "a.unused"]
    report = detect_unused_keys(
        keys,
        {"a.prefix"},
        compile_patterns(["*.ignored"]),
        {"a.used", "unrelated"},
    )
    assert report.unused == ("a.unused",)
    assert report.ignored == ("a.ignored",)
    assert report.total == 4
    assert report.calls_found == 2


def test_ignored_count_includes_used_keys():
    report = detect_unused_keys(
        ["a.x", "a.y"], set(), compile_patterns(["a.*"]), {"a.x"}
    )
    assert report.ignored == ("a.x", "a.y")
    assert report.unused == ()


def test_unused_keys_grouped_by_block():
    report = detect_unused_keys(
        ["nav.home", "nav.about", "pricing.plans.free", "root"],
        set(),
        _NO_IGNORE,
        set(),
    )
    assert report.by_block == {
        "nav": ["nav.about", "nav.home"],
        "pricing.plans": ["pricing.plans.free"],
        "": ["root"],
    }


def test_custom_threshold():
    report = detect_unused_keys(_keys(2), set(), _NO_IGNORE, set(), threshold=1)
    assert not report.ok


def test_validate_keys_scans_source(source_dir):
    (source_dir / "app.tsx").write_text(
        "t('nav.home'); t('nav.about'); tPricing('pricing.title');",
        encoding="utf-8",
    )
    report = validate_keys(EN, SourceScanner(root=source_dir), ["footer.*"])
    assert report.unused == ("pricing.plans.free", "pricing.plans.pro")
    assert report.ignored == ("footer.copyright",)
    assert report.calls_found == 3
    assert report.ok
