from datetime import datetime, timezone

from streamlit.testing.v1 import AppTest

from conftest import ROOT
from convertit.ui.components import format_timestamp

APP = str(ROOT / "app.py")


def test_format_timestamp_matches_long_en_us_form():
    now = datetime(2026, 10, 5, 14, 5, 9, tzinfo=timezone.utc)
    assert format_timestamp(now) == "Monday, October 5, 2026 at 02:05:09 PM UTC"


def test_format_timestamp_naive():
    assert format_timestamp(datetime(2026, 1, 1, 0, 0, 0)) == "Thursday, January 1, 2026 at 12:00:00 AM"


def test_app_converts_on_startup_with_fallback_rates(offline):
    at = AppTest.from_file(APP, default_timeout=10).run()
    assert not at.exception
    assert at.success[0].value == "1.00 USD = 0.92 EUR"
    assert len(offline) == 1


def test_app_amount_and_selector_changes(offline):
    at = AppTest.from_file(APP, default_timeout=10).run()

    at.text_input(key="fx_amount").input("100").run()
    assert at.success[0].value == "100.00 USD = 92.00 EUR"

    at.selectbox(key="fx_from").select("GBP").run()
    at.selectbox(key="fx_to").select("JPY").run()
    at.text_input(key="fx_amount").input("50").run()
    assert at.success[0].value == "50.00 GBP = 9462.03 JPY"


def test_app_rejects_invalid_amount(offline):
    at = AppTest.from_file(APP, default_timeout=10).run()
    calls_after_startup = len(offline)

    at.text_input(key="fx_amount").input("-5").run()
    assert at.error[0].value == "Please enter a valid amount"
    assert len(offline) == calls_after_startup


def test_app_convert_button_reruns_conversion(offline):
    at = AppTest.from_file(APP, default_timeout=10).run()
    at.button(key="convert").click().run()
    assert at.success[0].value == "1.00 USD = 0.92 EUR"
    assert len(offline) == 2
    assert not at.button(key="convert").disabled


def test_app_timestamp_is_rendered_once_per_session(offline, monkeypatch):
    from convertit.ui import components

    stamps = iter(f"stamp {n}" for n in range(100))
    monkeypatch.setattr(components, "format_timestamp", lambda now=None: next(stamps))

    at = AppTest.from_file(APP, default_timeout=10).run()
    first = at.caption[0].value
    assert first == "stamp 0"

    at.selectbox(key="fx_to").select("GBP").run()
    at.button(key="convert").click().run()
    assert at.caption[0].value == first
