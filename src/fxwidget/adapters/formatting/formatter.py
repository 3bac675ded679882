"""
Widget Formatter - Text Formatting and Presentation

This module formats conversion results for the widget's result field and
renders a whole widget view as plain text for logs and the console.

Files that USE this module:
- fxwidget.application.renderer (format_result for the result field)
- fxwidget.app (format_widget_view to log each rendered widget)
- tests.test_formatter (unit tests)

Files that this module USES:
- fxwidget.domain.models (WidgetView)
"""
from __future__ import annotations

from typing import Optional

from fxwidget.domain.models import WidgetView


def format_result(value: float, decimals: int = 2) -> str:
    """
    Format a converted amount with a fixed number of decimals.

    Args:
        value: Converted amount
        decimals: Digits after the decimal point (default: 2)

    Returns:
        Formatted string like '226.16', no thousands separators
    """
    return f"{value:.{decimals}f}"


def format_widget_view(view: WidgetView, widget_id: Optional[int] = None) -> str:
    """
    Format a widget view as a single line.

    Args:
        view: Rendered widget view
        widget_id: Optional instance id to prefix

    Returns:
        Formatted string like '#1 10.00 AED → 226.16 INR'
    """
    line = f"{view.amount} {view.from_currency} → {view.result} {view.to_currency}"
    if widget_id is not None:
        line = f"#{widget_id} {line}"
    return line
