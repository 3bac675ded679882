"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from fxwidget.shared.validators import validate_amount_text, validate_currency_code
from fxwidget.shared.logging_conf import setup_logging

__all__ = [
    "validate_amount_text",
    "validate_currency_code",
    "setup_logging",
]
