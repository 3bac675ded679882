"""
Channel Adapters - Calls from the Main Application

This package contains the method channel the main application uses to
reach the widget core.
"""

from fxwidget.adapters.channel.method_channel import MethodCallHandler, MethodChannel

__all__ = [
    "MethodCallHandler",
    "MethodChannel",
]
