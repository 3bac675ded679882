"""
Converter - Cross-Currency Conversion Through a Base Unit

Every rate in the table is the value of one base unit in that currency, so
a conversion divides by the source rate and multiplies by the target rate.

Files that USE this module:
- fxwidget.application.renderer (convert_request for each rendered view)
- tests.test_converter (unit tests)

Files that this module USES:
- fxwidget.domain.models (RateTable, ConversionRequest)
- fxwidget.domain.errors (InvalidAmountError, InvalidRateError)
- fxwidget.shared.validators (validate_amount_text)
"""
from __future__ import annotations

import math

from fxwidget.domain.errors import ConversionOverflowError, InvalidAmountError, InvalidRateError
from fxwidget.domain.models import ConversionRequest, RateTable
from fxwidget.shared.validators import validate_amount_text


def parse_amount(text: str) -> float:
    """
    Parse amount text as entered in the converter.

    Args:
        text: Decimal text, e.g. "10.00"

    Returns:
        Amount as float

    Raises:
        InvalidAmountError: If the text is empty, malformed, NaN or infinite
    """
    if text is None or not validate_amount_text(text):
        raise InvalidAmountError(f"Invalid amount: {text!r}")
    return float(text)


def _positive_rate(rates: RateTable, code: str) -> float:
    rate = rates[code]
    if rate <= 0:
        raise InvalidRateError(f"Rate for {code} must be positive, got {rate}")
    return rate


def convert(amount: float, from_currency: str, to_currency: str, rates: RateTable) -> float:
    """
    Convert an amount between two currencies of the same rate table.

    Args:
        amount: Amount in from_currency
        from_currency: Source currency code
        to_currency: Target currency code
        rates: Rate table, one base unit per code

    Returns:
        Amount in to_currency (unrounded)

    Raises:
        RateLookupError: If either code is missing from the table
        InvalidRateError: If either rate is zero or negative
        ConversionOverflowError: If the result is too large for a float
    """
    from_rate = _positive_rate(rates, from_currency)
    to_rate = _positive_rate(rates, to_currency)
    base_value = amount / from_rate
    result = base_value * to_rate
    if not math.isfinite(result):
        raise ConversionOverflowError(
            f"Converting {amount} {from_currency} to {to_currency} overflows"
        )
    return result


def convert_request(request: ConversionRequest, rates: RateTable) -> float:
    """Parse the request amount and convert it."""
    amount = parse_amount(request.amount)
    return convert(amount, request.from_currency, request.to_currency, rates)
