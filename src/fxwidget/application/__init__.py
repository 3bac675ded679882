"""
Application Layer - Use Cases and Services

This package contains the conversion, the widget renderer and the refresh
bridge. Adapters are reached through protocols.
"""

from fxwidget.application.converter import convert, convert_request, parse_amount
from fxwidget.application.renderer import PreferenceSource, WidgetRenderer, WidgetViewSink
from fxwidget.application.refresh_bridge import (
    UPDATE_WIDGET_METHOD,
    WidgetHost,
    WidgetRefreshBridge,
)

__all__ = [
    "convert",
    "convert_request",
    "parse_amount",
    "PreferenceSource",
    "WidgetRenderer",
    "WidgetViewSink",
    "UPDATE_WIDGET_METHOD",
    "WidgetHost",
    "WidgetRefreshBridge",
]
