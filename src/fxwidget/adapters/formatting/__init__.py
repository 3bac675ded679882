"""
Formatting Adapters - Output Presentation

This package contains formatters for widget fields and console output.
"""

from fxwidget.adapters.formatting.formatter import format_result, format_widget_view

__all__ = [
    "format_result",
    "format_widget_view",
]
