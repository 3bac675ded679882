# src/fxwidget/domain/errors.py
"""
Domain Errors - Conversion Exceptions

This module defines domain-specific exceptions raised while parsing the
cached rate table, the amount text, or while converting between currencies.
"""


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class RateTableError(DomainError):
    """Raised when the serialized rate table is not a JSON object."""
    pass


class RateLookupError(DomainError, KeyError):
    """Raised when a currency code is missing from the rate table."""

    def __init__(self, code: str):
        super().__init__(code)
        self.code = code

    def __str__(self) -> str:
        return f"No rate for currency {self.code!r}"


class InvalidRateError(DomainError):
    """Raised when a rate value is invalid (e.g., negative or zero)."""
    pass


class InvalidAmountError(DomainError, ValueError):
    """Raised when the amount text cannot be parsed as a finite number."""
    pass


class ConversionOverflowError(DomainError):
    """Raised when a conversion result is not a finite number."""
    pass
