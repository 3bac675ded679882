# src/fxwidget/__init__.py
"""
FXWidget - Currency Converter Home-Screen Widget Core

Renders a currency conversion (from, to, amount, result) into every placed
widget instance and refreshes those instances when the main application asks
for it over the widget method channel.
"""

__version__ = "1.0.0"
