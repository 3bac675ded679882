"""
Refresh Bridge Tests - Unit and Wiring Tests for Widget Refresh

This module tests the updateWidget method handling, the update broadcast
built from the host registry, and the whole path from a channel call to the
views drawn in the local host.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- fxwidget.application.refresh_bridge (WidgetRefreshBridge)
- fxwidget.app (build_runtime for wiring tests)
- fxwidget.config (Settings for a temporary preference file)
- unittest.mock (Mock for the host)
- pytest (testing framework)
"""
import json

import pytest  # Testing framework for writing and running tests

from unittest.mock import Mock, patch  # Mock objects and patching for testing

from fxwidget.adapters.channel.method_channel import MethodChannel  # Channel the bridge attaches to
from fxwidget.app import build_runtime  # Composition root
from fxwidget.application.refresh_bridge import UPDATE_WIDGET_METHOD, WidgetRefreshBridge  # Bridge to test
from fxwidget.config import Settings  # Settings for wiring tests
from fxwidget.domain.models import ACTION_APPWIDGET_UPDATE, MethodCall, UpdateBroadcast  # Domain models


class TestWidgetRefreshBridge:
    def test_request_widget_update_broadcasts_all_ids(self):
        host = Mock()
        host.get_widget_ids.return_value = [3, 7]
        bridge = WidgetRefreshBridge(host)

        broadcast = bridge.request_widget_update()

        host.get_widget_ids.assert_called_once_with("CurrencyWidgetProvider")
        host.send_broadcast.assert_called_once_with(
            UpdateBroadcast(component="CurrencyWidgetProvider", widget_ids=(3, 7))
        )
        assert broadcast.action == ACTION_APPWIDGET_UPDATE

    def test_request_widget_update_with_no_instances(self):
        host = Mock()
        host.get_widget_ids.return_value = []
        bridge = WidgetRefreshBridge(host, component="Other")

        broadcast = bridge.request_widget_update()

        assert broadcast == UpdateBroadcast(component="Other", widget_ids=())
        host.send_broadcast.assert_called_once_with(broadcast)

    def test_update_widget_method(self):
        host = Mock()
        host.get_widget_ids.return_value = [1]
        bridge = WidgetRefreshBridge(host)

        result = bridge.handle_method_call(MethodCall(method=UPDATE_WIDGET_METHOD))

        assert result.is_success
        assert result.value is None
        host.send_broadcast.assert_called_once()

    def test_unknown_method_not_implemented(self):
        host = Mock()
        bridge = WidgetRefreshBridge(host)

        result = bridge.handle_method_call(MethodCall(method="resizeWidget"))

        assert result.is_not_implemented
        host.get_widget_ids.assert_not_called()
        host.send_broadcast.assert_not_called()

    def test_attach(self):
        host = Mock()
        host.get_widget_ids.return_value = []
        channel = MethodChannel("com.example.currency_converter/widget")
        WidgetRefreshBridge(host).attach(channel)

        assert channel.invoke_method("updateWidget").is_success
        assert channel.invoke_method("somethingElse").is_not_implemented


@pytest.fixture
def runtime(tmp_path):
    settings = Settings(
        FXWIDGET_PREFS_FILE=tmp_path / "shared_prefs.json",
        FXWIDGET_PREFS_GROUP="CurrencyConverterPrefs",
    )
    return build_runtime(settings)


class TestRefreshWiring:
    def test_update_renders_placed_widgets(self, runtime):
        runtime.store.save_strings({
            "exchangeRates": json.dumps({"AED": 3.67, "INR": 83.0}),
            "fromCurrency": "AED",
            "toCurrency": "INR",
            "amount": "10.00",
        })
        first = runtime.host.place_widget("CurrencyWidgetProvider")
        second = runtime.host.place_widget("CurrencyWidgetProvider")

        result = runtime.channel.invoke_method("updateWidget")

        assert result.is_success
        for widget_id in (first, second):
            view = runtime.host.get_view(widget_id)
            assert view.result == "226.16"
            assert view.amount == "10.00"

    def test_update_without_rates_uses_defaults(self, runtime):
        widget_id = runtime.host.place_widget("CurrencyWidgetProvider")

        runtime.channel.invoke_method("updateWidget")

        view = runtime.host.get_view(widget_id)
        assert (view.from_currency, view.to_currency, view.amount, view.result) == (
            "AED", "INR", "1.00", "N/A"
        )

    def test_update_reflects_new_preferences(self, runtime):
        widget_id = runtime.host.place_widget("CurrencyWidgetProvider")
        runtime.channel.invoke_method("updateWidget")
        assert runtime.host.get_view(widget_id).result == "N/A"

        runtime.store.save_strings({
            "exchangeRates": json.dumps({"USD": 1.0, "EUR": 0.5}),
            "fromCurrency": "USD",
            "toCurrency": "EUR",
            "amount": "3",
        })
        runtime.channel.invoke_method("updateWidget")

        view = runtime.host.get_view(widget_id)
        assert view.result == "1.50"
        assert view.from_currency == "USD"

    def test_update_with_zero_instances_renders_nothing(self, runtime):
        with patch.object(runtime.renderer, "on_update") as mock_on_update:
            result = runtime.channel.invoke_method("updateWidget")

        assert result.is_success
        mock_on_update.assert_not_called()

    def test_tap_opens_main_application(self, runtime):
        widget_id = runtime.host.place_widget("CurrencyWidgetProvider")
        runtime.channel.invoke_method("updateWidget")

        action = runtime.host.tap(widget_id)

        assert action.target == "MainActivity"
        assert runtime.host.launched == [action]
