"""
Input Validation Utilities - Preference and Configuration Validation

This module validates the values the widget reads from configuration and
preferences: ISO-style currency codes and amount text.

Files that USE this module:
- fxwidget.config.settings (uses validation functions in Settings field validators)
- fxwidget.application.converter (validate_amount_text before parsing)

Files that this module USES:
- None (pure utility functions)
"""
import math
import re

_CURRENCY_CODE = re.compile(r'^[A-Z]{3}$')
# Plain decimal or scientific notation; no underscores, no nan/inf spellings
_AMOUNT_TEXT = re.compile(r'^\s*[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?\s*$')


def validate_currency_code(code: str) -> bool:
    """
    Validate a currency code.

    Args:
        code: Code to validate, e.g. "AED"

    Returns:
        True if the code is three uppercase letters, False otherwise
    """
    if not code:
        return False
    return bool(_CURRENCY_CODE.match(code))


def validate_amount_text(value: str) -> bool:
    """
    Validate amount text as entered in the converter.

    Args:
        value: Text to validate, e.g. "1.00"

    Returns:
        True if the text is a decimal number that parses to a finite float
    """
    if not value or not _AMOUNT_TEXT.match(value):
        return False
    return math.isfinite(float(value))
