"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables or a .env file, with validation.

Files that USE this module:
- fxwidget.app (loads settings to wire the widget core)
- fxwidget.adapters.persistence.prefs_store (default preference file and group)
- fxwidget.application.renderer (defaults, placeholder and decimals)

Files that this module USES:
- fxwidget.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging
from pathlib import Path  # Object-oriented filesystem paths
from typing import List, Optional  # Type hints for lists and optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from fxwidget.shared.validators import (
    validate_amount_text,  # Validate default amount text
    validate_currency_code,  # Validate default currency codes
)


class Settings(BaseSettings):
    """Widget settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- Preferences written by the main application ---
    prefs_file: Path = Field(
        default=Path("./data/shared_prefs.json"), alias="FXWIDGET_PREFS_FILE"
    )
    prefs_group: str = Field(default="CurrencyConverterPrefs", alias="FXWIDGET_PREFS_GROUP")

    # --- Conversion defaults (used when a preference is missing) ---
    default_from_currency: str = Field(default="AED", alias="DEFAULT_FROM_CURRENCY")
    default_to_currency: str = Field(default="INR", alias="DEFAULT_TO_CURRENCY")
    default_amount: str = Field(default="1.00", alias="DEFAULT_AMOUNT")

    # --- Rendering ---
    result_placeholder: str = Field(default="N/A", alias="RESULT_PLACEHOLDER")
    result_decimals: int = Field(default=2, alias="RESULT_DECIMALS", ge=0, le=8)

    # --- Widget host / channel ---
    widget_channel: str = Field(
        default="com.example.currency_converter/widget", alias="WIDGET_CHANNEL"
    )
    widget_component: str = Field(default="CurrencyWidgetProvider", alias="WIDGET_COMPONENT")
    widget_ids: List[int] = Field(default_factory=lambda: [1], alias="WIDGET_IDS")

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="FXWIDGET_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @field_validator("default_from_currency", "default_to_currency")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        """Validate currency code format."""
        v = v.strip().upper()
        if not validate_currency_code(v):
            raise ValueError("Currency code must be three letters, e.g. AED")
        return v

    @field_validator("default_amount")
    @classmethod
    def validate_amount(cls, v: str) -> str:
        """Validate the default amount text."""
        if not validate_amount_text(v):
            raise ValueError("DEFAULT_AMOUNT must be a finite number")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        v = v.upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"Unknown LOG_LEVEL: {v}")
        return v

    @field_validator("widget_ids")
    @classmethod
    def validate_widget_ids(cls, v: List[int]) -> List[int]:
        """Widget ids are positive and unique."""
        if any(i <= 0 for i in v):
            raise ValueError("WIDGET_IDS must be positive integers")
        if len(set(v)) != len(v):
            raise ValueError("WIDGET_IDS must not repeat")
        return v


# Global settings instance
settings = Settings()
