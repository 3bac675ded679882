"""
Widget Refresh Bridge - Lets the Main Application Redraw Its Widgets

The main application calls `updateWidget` on the widget method channel after
it has stored new rates or a new selection. The bridge enumerates every
placed instance of the widget component and broadcasts the standard
widget-update action with those ids, so the host runs the renderer for each.

Files that USE this module:
- fxwidget.app (attaches the bridge to the widget channel)
- tests.test_refresh_bridge (unit tests)

Files that this module USES:
- fxwidget.adapters.channel.method_channel (MethodChannel, for attach)
- fxwidget.domain.models (MethodCall, MethodResult, UpdateBroadcast)
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Protocol

from fxwidget.domain.models import MethodCall, MethodResult, UpdateBroadcast

if TYPE_CHECKING:
    from fxwidget.adapters.channel.method_channel import MethodChannel

logger = logging.getLogger(__name__)

UPDATE_WIDGET_METHOD = "updateWidget"


class WidgetHost(Protocol):
    """The parts of the widget host the bridge talks to."""
    def get_widget_ids(self, component: str) -> List[int]:
        ...

    def send_broadcast(self, broadcast: UpdateBroadcast) -> None:
        ...


class WidgetRefreshBridge:
    """Answers widget method calls from the main application."""

    def __init__(self, host: WidgetHost, component: str = "CurrencyWidgetProvider"):
        """
        Initialize the bridge.

        Args:
            host: Widget host holding the registry and delivering broadcasts
            component: Widget component whose instances are refreshed
        """
        self.host = host
        self.component = component

    def request_widget_update(self) -> UpdateBroadcast:
        """
        Broadcast an update to every placed instance of the component.

        With no placed instances the broadcast carries no ids and nothing
        is rendered.

        Returns:
            The broadcast that was sent
        """
        widget_ids = tuple(self.host.get_widget_ids(self.component))
        broadcast = UpdateBroadcast(component=self.component, widget_ids=widget_ids)
        self.host.send_broadcast(broadcast)
        logger.info("Requested update of %d %s widget(s)", len(widget_ids), self.component)
        return broadcast

    def handle_method_call(self, call: MethodCall) -> MethodResult:
        """
        Dispatch a method call received on the widget channel.

        Args:
            call: Incoming call

        Returns:
            success(None) for updateWidget, not_implemented for anything else
        """
        if call.method == UPDATE_WIDGET_METHOD:
            self.request_widget_update()
            return MethodResult.success(None)
        logger.debug("Unknown widget channel method: %s", call.method)
        return MethodResult.not_implemented()

    def attach(self, channel: MethodChannel) -> None:
        """Install this bridge as the handler of a method channel."""
        channel.set_method_call_handler(self.handle_method_call)
        logger.debug("Widget refresh bridge attached to channel %s", channel.name)
