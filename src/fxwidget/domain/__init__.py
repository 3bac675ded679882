"""
Domain Layer - Pure Business Objects

This package contains domain models and business rules.
No dependencies on infrastructure or external systems.
"""

from fxwidget.domain.models import (
    ACTION_APPWIDGET_UPDATE,
    MAIN_VIEW,
    ConversionRequest,
    LaunchAction,
    MethodCall,
    MethodResult,
    PreferenceSnapshot,
    RateTable,
    UpdateBroadcast,
    WidgetView,
)
from fxwidget.domain.errors import (
    ConversionOverflowError,
    DomainError,
    InvalidAmountError,
    InvalidRateError,
    RateLookupError,
    RateTableError,
)

__all__ = [
    "ACTION_APPWIDGET_UPDATE",
    "MAIN_VIEW",
    "ConversionRequest",
    "LaunchAction",
    "MethodCall",
    "MethodResult",
    "PreferenceSnapshot",
    "RateTable",
    "UpdateBroadcast",
    "WidgetView",
    "ConversionOverflowError",
    "DomainError",
    "InvalidAmountError",
    "InvalidRateError",
    "RateLookupError",
    "RateTableError",
]
