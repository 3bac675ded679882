# src/fxwidget/app.py
"""
Application Entry Point - Widget Core Wiring

This module serves as the composition root for the widget core. It wires
the preference store, the widget host, the renderer and the refresh bridge,
then asks for a refresh over the widget channel the way the main
application does after saving new rates.

Files that USE this module:
- fxwidget console script (pyproject entry point)
- python -m fxwidget.app

Files that this module USES:
- fxwidget.shared.logging_conf (setup_logging for logging configuration)
- fxwidget.config (settings for configuration management)
- fxwidget.adapters.* (preference store, local host, method channel, formatter)
- fxwidget.application.* (WidgetRenderer, WidgetRefreshBridge)
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Optional

from fxwidget.adapters.channel.method_channel import MethodChannel
from fxwidget.adapters.formatting.formatter import format_widget_view
from fxwidget.adapters.host.local_host import LocalWidgetHost
from fxwidget.adapters.persistence.prefs_store import PreferenceStore
from fxwidget.application.refresh_bridge import UPDATE_WIDGET_METHOD, WidgetRefreshBridge
from fxwidget.application.renderer import WidgetRenderer
from fxwidget.config import Settings
from fxwidget.shared.logging_conf import setup_logging


@dataclass
class WidgetRuntime:
    """Everything the widget core needs at run time, wired together."""
    settings: Settings
    store: PreferenceStore
    host: LocalWidgetHost
    renderer: WidgetRenderer
    bridge: WidgetRefreshBridge
    channel: MethodChannel


def build_runtime(settings: Optional[Settings] = None) -> WidgetRuntime:
    """
    Wire the widget core from settings.

    Args:
        settings: Settings to use (default: the global settings)

    Returns:
        WidgetRuntime with the renderer registered on the host and the
        bridge attached to the widget channel
    """
    if settings is None:
        from fxwidget.config import settings as global_settings
        settings = global_settings

    store = PreferenceStore(settings.prefs_file, settings.prefs_group)
    host = LocalWidgetHost()
    renderer = WidgetRenderer(
        sink=host,
        source=store,
        placeholder=settings.result_placeholder,
        decimals=settings.result_decimals,
        default_from=settings.default_from_currency,
        default_to=settings.default_to_currency,
        default_amount=settings.default_amount,
    )
    host.register_provider(settings.widget_component, renderer)

    bridge = WidgetRefreshBridge(host, component=settings.widget_component)
    channel = MethodChannel(settings.widget_channel)
    bridge.attach(channel)

    return WidgetRuntime(
        settings=settings,
        store=store,
        host=host,
        renderer=renderer,
        bridge=bridge,
        channel=channel,
    )


def main() -> int:
    """
    Render the configured widgets once.

    This function:
    1. Sets up logging and loads settings
    2. Wires the widget core and places the configured instances
    3. Invokes updateWidget over the widget channel
    4. Logs every rendered widget

    Returns:
        Process exit code
    """
    from fxwidget.config import settings

    setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        log_stdout=settings.log_stdout,
    )
    logger = logging.getLogger(__name__)
    logger.info("Preference file: %s (group %s)", settings.prefs_file, settings.prefs_group)

    runtime = build_runtime(settings)
    for widget_id in settings.widget_ids:
        runtime.host.place_widget(settings.widget_component, widget_id)

    result = runtime.channel.invoke_method(UPDATE_WIDGET_METHOD)
    if not result.is_success:
        logger.error("Widget update failed: %s %s", result.error_code, result.error_message)
        return 1

    for widget_id in runtime.host.get_widget_ids(settings.widget_component):
        view = runtime.host.get_view(widget_id)
        if view is None:
            logger.warning("Widget #%d was not rendered", widget_id)
            continue
        logger.info("%s", format_widget_view(view, widget_id))
    return 0


if __name__ == "__main__":
    sys.exit(main())
