"""
Preference Store Tests - Unit Tests for File-Backed Preferences

This module tests reading converter preferences from a JSON preference file,
the defaults applied to missing entries, and the atomic writer.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- fxwidget.adapters.persistence.prefs_store (PreferenceStore and key constants)
- fxwidget.domain.models (PreferenceSnapshot)
- pytest (testing framework)
"""
import json

import pytest  # Testing framework for writing and running tests

from fxwidget.adapters.persistence.prefs_store import (
    AMOUNT_KEY,
    FROM_CURRENCY_KEY,
    RATES_KEY,
    TO_CURRENCY_KEY,
    PreferenceStore,
)
from fxwidget.domain.models import PreferenceSnapshot  # Expected snapshots


GROUP = "CurrencyConverterPrefs"


@pytest.fixture
def prefs_path(tmp_path):
    return tmp_path / "shared_prefs.json"


def _write(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")


class TestSnapshot:
    def test_missing_file_gives_defaults(self, prefs_path):
        store = PreferenceStore(prefs_path, GROUP)
        assert store.snapshot() == PreferenceSnapshot(
            exchange_rates=None, from_currency="AED", to_currency="INR", amount="1.00"
        )
        assert not prefs_path.exists()

    def test_stored_values(self, prefs_path):
        _write(prefs_path, {GROUP: {
            RATES_KEY: '{"AED": 3.67}',
            FROM_CURRENCY_KEY: "USD",
            TO_CURRENCY_KEY: "EUR",
            AMOUNT_KEY: "10.00",
        }})
        snap = PreferenceStore(prefs_path, GROUP).snapshot()
        assert snap.exchange_rates == '{"AED": 3.67}'
        assert snap.from_currency == "USD"
        assert snap.to_currency == "EUR"
        assert snap.amount == "10.00"
        assert snap.has_rates

    def test_partial_values_use_defaults(self, prefs_path):
        _write(prefs_path, {GROUP: {TO_CURRENCY_KEY: "GBP"}})
        snap = PreferenceStore(prefs_path, GROUP).snapshot(default_from="USD", default_amount="5")
        assert snap.from_currency == "USD"
        assert snap.to_currency == "GBP"
        assert snap.amount == "5"
        assert not snap.has_rates

    def test_null_value_uses_default(self, prefs_path):
        _write(prefs_path, {GROUP: {AMOUNT_KEY: None}})
        assert PreferenceStore(prefs_path, GROUP).snapshot().amount == "1.00"

    def test_rates_stored_as_object(self, prefs_path):
        _write(prefs_path, {GROUP: {RATES_KEY: {"AED": 3.67, "INR": 83.0}}})
        snap = PreferenceStore(prefs_path, GROUP).snapshot()
        assert json.loads(snap.exchange_rates) == {"AED": 3.67, "INR": 83.0}

    def test_non_string_amount_coerced(self, prefs_path):
        _write(prefs_path, {GROUP: {AMOUNT_KEY: 12.5}})
        assert PreferenceStore(prefs_path, GROUP).snapshot().amount == "12.5"

    def test_other_group_ignored(self, prefs_path):
        _write(prefs_path, {"OtherPrefs": {FROM_CURRENCY_KEY: "USD"}})
        assert PreferenceStore(prefs_path, GROUP).snapshot().from_currency == "AED"

    def test_corrupt_file_gives_defaults(self, prefs_path):
        prefs_path.write_text("{not json", encoding="utf-8")
        snap = PreferenceStore(prefs_path, GROUP).snapshot()
        assert snap == PreferenceSnapshot()
        # Read-only: the corrupt file is left alone
        assert prefs_path.read_text(encoding="utf-8") == "{not json"

    def test_group_not_an_object(self, prefs_path):
        _write(prefs_path, {GROUP: ["AED"]})
        assert PreferenceStore(prefs_path, GROUP).snapshot() == PreferenceSnapshot()

    def test_file_not_an_object(self, prefs_path):
        _write(prefs_path, ["AED"])
        assert PreferenceStore(prefs_path, GROUP).snapshot() == PreferenceSnapshot()


class TestGetString:
    def test_get_string(self, prefs_path):
        _write(prefs_path, {GROUP: {FROM_CURRENCY_KEY: "USD"}})
        store = PreferenceStore(prefs_path, GROUP)
        assert store.get_string(FROM_CURRENCY_KEY, "AED") == "USD"
        assert store.get_string(TO_CURRENCY_KEY, "INR") == "INR"
        assert store.get_string(RATES_KEY) is None


class TestSave:
    def test_save_strings_round_trip(self, prefs_path):
        store = PreferenceStore(prefs_path, GROUP)
        store.save_strings({FROM_CURRENCY_KEY: "USD", AMOUNT_KEY: "2.50"})
        snap = store.snapshot()
        assert snap.from_currency == "USD"
        assert snap.amount == "2.50"

    def test_save_preserves_other_groups_and_keys(self, prefs_path):
        _write(prefs_path, {"OtherPrefs": {"x": "1"}, GROUP: {TO_CURRENCY_KEY: "GBP"}})
        store = PreferenceStore(prefs_path, GROUP)
        store.save_string(FROM_CURRENCY_KEY, "USD")

        data = json.loads(prefs_path.read_text(encoding="utf-8"))
        assert data["OtherPrefs"] == {"x": "1"}
        assert data[GROUP] == {TO_CURRENCY_KEY: "GBP", FROM_CURRENCY_KEY: "USD"}

    def test_save_creates_directory(self, tmp_path):
        path = tmp_path / "nested" / "prefs.json"
        PreferenceStore(path, GROUP).save_string(AMOUNT_KEY, "3")
        assert path.exists()
        assert not list(path.parent.glob("*.tmp"))
