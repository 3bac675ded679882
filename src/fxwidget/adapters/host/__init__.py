"""
Host Adapters - Widget Framework

This package contains the in-process widget host: instance registry,
update broadcasts and view storage.
"""

from fxwidget.adapters.host.local_host import LocalWidgetHost, WidgetProvider

__all__ = [
    "LocalWidgetHost",
    "WidgetProvider",
]
