"""
Widget Renderer - Draws the Conversion into Widget Instances

For each widget instance the renderer takes a snapshot of the converter
preferences, converts the amount through the cached rate table and writes the
from/to/amount/result fields plus the tap action into the instance's view.

Files that USE this module:
- fxwidget.adapters.host.local_host (calls on_update when an update broadcast arrives)
- fxwidget.app (wires the renderer to the preference store and host)
- tests.test_renderer (unit tests)

Files that this module USES:
- fxwidget.application.converter (convert_request)
- fxwidget.adapters.formatting.formatter (format_result)
- fxwidget.domain.models (PreferenceSnapshot, RateTable, WidgetView, LaunchAction)
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional, Protocol

from fxwidget.adapters.formatting.formatter import format_result
from fxwidget.application.converter import convert_request
from fxwidget.domain.errors import DomainError
from fxwidget.domain.models import (
    MAIN_VIEW,
    LaunchAction,
    PreferenceSnapshot,
    RateTable,
    WidgetView,
)

logger = logging.getLogger(__name__)


class PreferenceSource(Protocol):
    """Read interface onto the preferences written by the main application."""
    def snapshot(self, default_from: str, default_to: str, default_amount: str) -> PreferenceSnapshot:
        ...


class WidgetViewSink(Protocol):
    """Where rendered views go, keyed by instance id."""
    def update_widget(self, widget_id: int, view: WidgetView) -> None:
        ...


class WidgetRenderer:
    """
    Renders converter widgets.

    No per-instance state is kept: every instance is redrawn from the
    snapshot it is given.
    """

    def __init__(
        self,
        sink: WidgetViewSink,
        source: Optional[PreferenceSource] = None,
        placeholder: str = "N/A",
        decimals: int = 2,
        default_from: str = "AED",
        default_to: str = "INR",
        default_amount: str = "1.00",
        launch_target: str = MAIN_VIEW,
    ):
        """
        Initialize the renderer.

        Args:
            sink: Receives each rendered view (the widget host)
            source: Preference source read by on_update when no snapshot is given
            placeholder: Result text when no conversion can be shown
            decimals: Digits after the decimal point in the result
            default_from: Source currency when none is stored
            default_to: Target currency when none is stored
            default_amount: Amount text when none is stored
            launch_target: Application view opened when a widget is tapped
        """
        self.sink = sink
        self.source = source
        self.placeholder = placeholder
        self.decimals = decimals
        self.default_from = default_from
        self.default_to = default_to
        self.default_amount = default_amount
        self.launch_target = launch_target

    def read_snapshot(self) -> PreferenceSnapshot:
        """
        Read one snapshot from the preference source.

        Raises:
            RuntimeError: If the renderer has no preference source
        """
        if self.source is None:
            raise RuntimeError("WidgetRenderer has no preference source")
        return self.source.snapshot(
            default_from=self.default_from,
            default_to=self.default_to,
            default_amount=self.default_amount,
        )

    def compute_result(self, snapshot: PreferenceSnapshot, widget_id: Optional[int] = None) -> str:
        """
        Compute the text of the result field.

        A missing rate table, an unparseable table, malformed amount text,
        an unknown currency code or a non-positive rate all give the
        placeholder.

        Args:
            snapshot: Preference snapshot to convert
            widget_id: Instance id, for logging only

        Returns:
            Converted amount with fixed decimals, or the placeholder
        """
        if not snapshot.has_rates:
            logger.debug("Widget %s: no exchange rates stored", widget_id)
            return self.placeholder

        try:
            rates = RateTable.from_json(snapshot.exchange_rates)
            value = convert_request(snapshot.request, rates)
        except DomainError as e:
            logger.warning(
                "Widget %s: cannot convert %s %s to %s, showing placeholder: %s",
                widget_id,
                snapshot.amount,
                snapshot.from_currency,
                snapshot.to_currency,
                e,
            )
            return self.placeholder

        return format_result(value, self.decimals)

    def build_view(self, snapshot: PreferenceSnapshot, widget_id: Optional[int] = None) -> WidgetView:
        """Build the full view for a snapshot without touching the host."""
        return WidgetView(
            from_currency=snapshot.from_currency,
            to_currency=snapshot.to_currency,
            amount=snapshot.amount,
            result=self.compute_result(snapshot, widget_id),
            on_click=LaunchAction(target=self.launch_target),
        )

    def render(self, widget_id: int, snapshot: PreferenceSnapshot) -> WidgetView:
        """
        Render one widget instance and push its view to the host.

        Args:
            widget_id: Instance id assigned by the host
            snapshot: Preferences to render

        Returns:
            The view that was pushed
        """
        view = self.build_view(snapshot, widget_id)
        self.sink.update_widget(widget_id, view)
        logger.debug("Widget %s rendered: result=%s", widget_id, view.result)
        return view

    def on_update(
        self,
        widget_ids: Iterable[int],
        snapshot: Optional[PreferenceSnapshot] = None,
    ) -> Dict[int, WidgetView]:
        """
        Render every instance named by an update cycle.

        All instances share one snapshot, read once when none is given.
        A failing instance is logged and skipped.

        Args:
            widget_ids: Instance ids to redraw
            snapshot: Preferences to render (default: read from the source)

        Returns:
            Dictionary of {widget_id: view} for the instances rendered
        """
        widget_ids = list(widget_ids)
        if not widget_ids:
            return {}

        if snapshot is None:
            snapshot = self.read_snapshot()

        views: Dict[int, WidgetView] = {}
        for widget_id in widget_ids:
            try:
                views[widget_id] = self.render(widget_id, snapshot)
            except Exception as e:
                logger.error("Failed to render widget %s: %s", widget_id, e, exc_info=True)
        logger.info("Update cycle rendered %d of %d widget(s)", len(views), len(widget_ids))
        return views
