"""
Persistence Adapters - Data Storage

This package contains adapters for reading the converter preferences:
- File-based preference groups (JSON)
"""

from fxwidget.adapters.persistence.prefs_store import (
    AMOUNT_KEY,
    FROM_CURRENCY_KEY,
    RATES_KEY,
    TO_CURRENCY_KEY,
    PreferenceStore,
)

__all__ = [
    "AMOUNT_KEY",
    "FROM_CURRENCY_KEY",
    "RATES_KEY",
    "TO_CURRENCY_KEY",
    "PreferenceStore",
]
