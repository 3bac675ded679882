"""
Local Widget Host - In-Process Widget Registry, Broadcasts and Views

Stands in for the operating system's widget framework: it assigns ids to
placed widget instances, delivers update broadcasts to the provider
registered for a component, keeps the last view drawn into each instance
and records the application views opened by tapping a widget.

Files that USE this module:
- fxwidget.app (host for the renderer and the refresh bridge)
- tests.test_local_host, tests.test_refresh_bridge (unit and wiring tests)

Files that this module USES:
- fxwidget.domain.models (UpdateBroadcast, WidgetView, LaunchAction)
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Protocol

from fxwidget.domain.models import (
    ACTION_APPWIDGET_UPDATE,
    LaunchAction,
    UpdateBroadcast,
    WidgetView,
)

logger = logging.getLogger(__name__)


class WidgetProvider(Protocol):
    """Component that redraws its instances on update."""
    def on_update(self, widget_ids: Iterable[int]) -> object:
        ...


class LocalWidgetHost:
    """Single-threaded widget host; callbacks run to completion in order."""

    def __init__(self):
        self._next_id = 1
        self._instances: Dict[str, List[int]] = {}
        self._providers: Dict[str, WidgetProvider] = {}
        self._views: Dict[int, WidgetView] = {}
        self.launched: List[LaunchAction] = []

    # --- registry ---

    def register_provider(self, component: str, provider: WidgetProvider) -> None:
        """
        Register the provider that handles broadcasts for a component.

        Args:
            component: Widget component name
            provider: Object with on_update(widget_ids)
        """
        if component in self._providers:
            logger.warning("Overwriting provider for component: %s", component)
        self._providers[component] = provider
        self._instances.setdefault(component, [])
        logger.debug("Registered widget provider: %s", component)

    def place_widget(self, component: str, widget_id: Optional[int] = None) -> int:
        """
        Place a new widget instance.

        Args:
            component: Widget component name
            widget_id: Explicit id to use (default: next free id)

        Returns:
            Id of the placed instance

        Raises:
            ValueError: If the id is already in use
        """
        if widget_id is None:
            widget_id = self._next_id
        if self._component_of(widget_id) is not None:
            raise ValueError(f"Widget id {widget_id} is already placed")
        self._next_id = max(self._next_id, widget_id + 1)
        self._instances.setdefault(component, []).append(widget_id)
        logger.info("Placed %s widget #%d", component, widget_id)
        return widget_id

    def remove_widget(self, widget_id: int) -> None:
        """Remove a placed instance and forget its view."""
        component = self._component_of(widget_id)
        if component is None:
            logger.warning("Cannot remove unknown widget #%s", widget_id)
            return
        self._instances[component].remove(widget_id)
        self._views.pop(widget_id, None)
        logger.info("Removed %s widget #%d", component, widget_id)

    def get_widget_ids(self, component: str) -> List[int]:
        """Return ids of every placed instance of a component."""
        return list(self._instances.get(component, []))

    def _component_of(self, widget_id: int) -> Optional[str]:
        for component, ids in self._instances.items():
            if widget_id in ids:
                return component
        return None

    # --- broadcasts ---

    def send_broadcast(self, broadcast: UpdateBroadcast) -> None:
        """
        Deliver a broadcast to the provider of its component.

        Only the widget-update action is handled, and only when it carries
        at least one id.
        """
        if broadcast.action != ACTION_APPWIDGET_UPDATE:
            logger.debug("Ignoring broadcast action %s", broadcast.action)
            return

        provider = self._providers.get(broadcast.component)
        if provider is None:
            logger.warning("No provider registered for component %s", broadcast.component)
            return

        if not broadcast.widget_ids:
            logger.debug("Update broadcast for %s carries no widget ids", broadcast.component)
            return

        provider.on_update(list(broadcast.widget_ids))

    def refresh_all(self) -> None:
        """Periodic refresh: broadcast an update to every registered component."""
        for component in list(self._providers):
            self.send_broadcast(
                UpdateBroadcast(component=component, widget_ids=tuple(self.get_widget_ids(component)))
            )

    # --- views ---

    def update_widget(self, widget_id: int, view: WidgetView) -> None:
        """Replace the view of a placed instance; unknown ids are ignored."""
        if self._component_of(widget_id) is None:
            logger.warning("Ignoring view for unknown widget #%s", widget_id)
            return
        self._views[widget_id] = view

    def get_view(self, widget_id: int) -> Optional[WidgetView]:
        """Return the last view drawn into an instance, if any."""
        return self._views.get(widget_id)

    def tap(self, widget_id: int) -> LaunchAction:
        """
        Tap a widget instance, running its click action.

        Raises:
            LookupError: If the instance has not been drawn yet
        """
        view = self._views.get(widget_id)
        if view is None:
            raise LookupError(f"Widget #{widget_id} has no view to tap")
        self.launched.append(view.on_click)
        logger.info("Widget #%d tapped, opening %s", widget_id, view.on_click.target)
        return view.on_click
