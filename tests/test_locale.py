import json

from swipe_times.core.locale_manager import FALLBACK_LOCALE, LocaleManager, T, SUPPORTED_LOCALES
from swipe_times.i18n.tools import find_missing_keys
from swipe_times.services.drill_service import summarize_report
from swipe_times.services.metrics import compute_report


def test_shipped_locales_are_complete():
    missing = find_missing_keys()

    assert {"en", "es"} <= set(missing)
    assert all(not keys for keys in missing.values()), missing


def test_supported_locales_include_fallback():
    assert FALLBACK_LOCALE in SUPPORTED_LOCALES
    assert "es" in SUPPORTED_LOCALES


def test_result_rows_have_translations():
    for key, _ in summarize_report(compute_report(1, 1, 1)):
        assert not T(key, use_fallback=True).startswith("!!")


def test_translate_with_interpolation():
    assert T("cards_remaining", use_fallback=True, count=12) == "12 left"


def test_missing_key_is_marked():
    assert T("no_such_key", use_fallback=True) == "!! no_such_key !!"


def test_bad_format_returns_raw_string():
    assert T("cards_remaining", use_fallback=True, wrong=1) == "{count} left"


def test_manager_tolerates_broken_files(tmp_path):
    (tmp_path / "en.json").write_text(json.dumps({"hello": "Hello"}), encoding="utf-8")
    (tmp_path / "xx.json").write_text("{not json", encoding="utf-8")
    (tmp_path / "yy.json").write_text("[1, 2]", encoding="utf-8")

    manager = LocaleManager(package_ref=tmp_path)

    assert set(manager.supported_locales) == {"en", "xx", "yy"}
    assert manager.T("hello", use_fallback=True) == "Hello"


def test_manager_without_fallback_file(tmp_path):
    manager = LocaleManager(package_ref=tmp_path)

    assert manager.supported_locales == ["en"]
    assert manager.T("anything", use_fallback=True) == "!! anything !!"
