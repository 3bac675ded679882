# src/fxwidget/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains domain models representing core widget concepts:
- Cached exchange-rate table
- Conversion requests and preference snapshots
- Rendered widget views and their tap action
- Update broadcasts and method-channel calls

Files that USE this module:
- fxwidget.application.* (converter, renderer and refresh bridge)
- fxwidget.adapters.* (adapters create and consume domain models)
- tests.* (tests use domain models for test data)

Files that this module USES:
- fxwidget.domain.errors (RateTableError, RateLookupError)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import json  # Decode the serialized rate table
import logging
import math  # Finite checks for rate values
from dataclasses import dataclass, field  # Decorator for creating data classes
from types import MappingProxyType  # Read-only view over the rate dict
from typing import Any, Mapping, Optional, Tuple

from fxwidget.domain.errors import RateLookupError, RateTableError

logger = logging.getLogger(__name__)

# Standard widget-update action understood by the widget host
ACTION_APPWIDGET_UPDATE = "android.appwidget.action.APPWIDGET_UPDATE"

# Name of the application view opened when a widget is tapped
MAIN_VIEW = "MainActivity"


def _coerce_rate(value: Any) -> Optional[float]:
    """
    Convert a raw JSON value to a rate.

    Numbers and numeric strings are accepted; booleans, nulls, containers
    and non-finite numbers are not.

    Returns:
        Rate as float, or None if the value is not usable
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float, str)):
        try:
            rate = float(value)
        except ValueError:
            return None
        return rate if math.isfinite(rate) else None
    return None


@dataclass(frozen=True)
class RateTable:
    """
    Exchange rates keyed by currency code.

    Every rate is the value of one common base unit expressed in that
    currency, so converting goes amount / rate[from] * rate[to].
    """
    rates: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "rates", MappingProxyType(dict(self.rates)))

    def __getitem__(self, code: str) -> float:
        try:
            return self.rates[code]
        except KeyError:
            raise RateLookupError(code) from None

    def __contains__(self, code: object) -> bool:
        return code in self.rates

    def __len__(self) -> int:
        return len(self.rates)

    def codes(self) -> Tuple[str, ...]:
        """Return the currency codes in the table, sorted."""
        return tuple(sorted(self.rates))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> RateTable:
        """
        Build a table from a decoded JSON object.

        Entries whose value is not a finite number are dropped.
        """
        rates = {}
        for code, raw in data.items():
            rate = _coerce_rate(raw)
            if rate is None:
                logger.warning("Dropping unusable rate for %s: %r", code, raw)
                continue
            rates[str(code)] = rate
        return cls(rates)

    @classmethod
    def from_json(cls, text: str) -> RateTable:
        """
        Parse the serialized rate table.

        Args:
            text: JSON object text, e.g. '{"AED": 3.67, "INR": 83.0}'

        Returns:
            RateTable with every usable entry

        Raises:
            RateTableError: If the text is not a JSON object
        """
        try:
            data = json.loads(text)
        except (TypeError, ValueError) as e:
            raise RateTableError(f"Rate table is not valid JSON: {e}") from e
        except RecursionError as e:
            raise RateTableError("Rate table is nested too deeply") from e
        if not isinstance(data, dict):
            raise RateTableError(
                f"Rate table must be a JSON object, got {type(data).__name__}"
            )
        return cls.from_mapping(data)


@dataclass(frozen=True)
class ConversionRequest:
    """
    What the user asked the converter for.

    Attributes:
        amount: Amount as entered, decimal text
        from_currency: Source currency code
        to_currency: Target currency code
    """
    amount: str = "1.00"
    from_currency: str = "AED"
    to_currency: str = "INR"


@dataclass(frozen=True)
class PreferenceSnapshot:
    """
    Read-only copy of the converter preferences at one point in time.

    Attributes:
        exchange_rates: Serialized rate table, None when never stored
        from_currency: Source currency code
        to_currency: Target currency code
        amount: Amount text
    """
    exchange_rates: Optional[str] = None
    from_currency: str = "AED"
    to_currency: str = "INR"
    amount: str = "1.00"

    @property
    def request(self) -> ConversionRequest:
        return ConversionRequest(
            amount=self.amount,
            from_currency=self.from_currency,
            to_currency=self.to_currency,
        )

    @property
    def has_rates(self) -> bool:
        return self.exchange_rates is not None


@dataclass(frozen=True)
class LaunchAction:
    """Opens a view of the main application."""
    target: str = MAIN_VIEW


@dataclass(frozen=True)
class WidgetView:
    """
    Everything drawn into one widget instance.

    Attributes:
        from_currency: Source currency label
        to_currency: Target currency label
        amount: Amount label
        result: Converted amount, or the placeholder
        on_click: Action run when the widget is tapped
    """
    from_currency: str
    to_currency: str
    amount: str
    result: str
    on_click: LaunchAction = field(default_factory=LaunchAction)


@dataclass(frozen=True)
class UpdateBroadcast:
    """
    System broadcast asking a widget component to redraw.

    Attributes:
        component: Widget component the broadcast is addressed to
        widget_ids: Instance ids to refresh (may be empty)
        action: Broadcast action
    """
    component: str
    widget_ids: Tuple[int, ...] = ()
    action: str = ACTION_APPWIDGET_UPDATE


@dataclass(frozen=True)
class MethodCall:
    """A call received on a method channel."""
    method: str
    arguments: Any = None


@dataclass(frozen=True)
class MethodResult:
    """
    Outcome of a method-channel call.

    Attributes:
        status: "success", "error" or "not_implemented"
        value: Return value on success
        error_code: Error code on error
        error_message: Human readable error on error
    """
    status: str
    value: Any = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None

    @classmethod
    def success(cls, value: Any = None) -> MethodResult:
        return cls(status="success", value=value)

    @classmethod
    def error(cls, code: str, message: Optional[str] = None) -> MethodResult:
        return cls(status="error", error_code=code, error_message=message)

    @classmethod
    def not_implemented(cls) -> MethodResult:
        return cls(status="not_implemented")

    @property
    def is_success(self) -> bool:
        return self.status == "success"

    @property
    def is_not_implemented(self) -> bool:
        return self.status == "not_implemented"
