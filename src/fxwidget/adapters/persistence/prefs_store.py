"""
Preference Store - Converter Preferences Backed by a JSON File

The main application persists the converter state as string entries in a
named preference group. This module reads those entries (with defaults for
missing ones) and hands the widget an immutable snapshot of them. A writer is
provided for the application side and for fixtures.

File layout:
    {
      "CurrencyConverterPrefs": {
        "exchangeRates": "{\"AED\": 3.67, \"INR\": 83.0}",
        "fromCurrency": "AED",
        "toCurrency": "INR",
        "amount": "10.00"
      }
    }

Files that USE this module:
- fxwidget.app (PreferenceStore is the renderer's preference source)
- tests.test_prefs_store (unit tests)

Files that this module USES:
- fxwidget.config (settings for the default file path and group)
- fxwidget.domain.models (PreferenceSnapshot)
"""
from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from fxwidget.domain.models import PreferenceSnapshot

logger = logging.getLogger(__name__)

RATES_KEY = "exchangeRates"
FROM_CURRENCY_KEY = "fromCurrency"
TO_CURRENCY_KEY = "toCurrency"
AMOUNT_KEY = "amount"


class PreferenceStore:
    """Read string preferences of one named group from a JSON file."""

    def __init__(self, path: Optional[Union[str, Path]] = None, group: Optional[str] = None):
        """
        Initialize preference store.

        Args:
            path: JSON file holding the preference groups (default: settings.prefs_file)
            group: Name of the preference group (default: settings.prefs_group)
        """
        if path is None or group is None:
            from fxwidget.config import settings
            path = settings.prefs_file if path is None else path
            group = settings.prefs_group if group is None else group
        self.path = Path(path)
        self.group = group

    def _load_file(self) -> Dict[str, Any]:
        """
        Load every preference group from disk.

        Missing or corrupt files read as empty.
        """
        if not self.path.exists():
            logger.debug("No preference file at %s", self.path)
            return {}

        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.warning("Preference file %s is corrupt, using defaults: %s", self.path, e)
            return {}
        except OSError as e:
            logger.error("Failed to read preference file %s: %s", self.path, e)
            return {}

        if not isinstance(data, dict):
            logger.warning("Preference file %s is not a JSON object, using defaults", self.path)
            return {}
        return data

    def _load_group(self) -> Dict[str, Any]:
        group = self._load_file().get(self.group)
        if group is None:
            return {}
        if not isinstance(group, dict):
            logger.warning("Preference group %s is not an object, using defaults", self.group)
            return {}
        return group

    @staticmethod
    def _as_string(key: str, value: Any) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, str):
            return value
        # Rate tables may be stored decoded
        if key == RATES_KEY and isinstance(value, (dict, list)):
            return json.dumps(value)
        return str(value)

    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """
        Get a preference value as a string.

        Args:
            key: Preference key
            default: Value returned when the key is absent

        Returns:
            Stored value, or default
        """
        value = self._as_string(key, self._load_group().get(key))
        return default if value is None else value

    def snapshot(
        self,
        default_from: str = "AED",
        default_to: str = "INR",
        default_amount: str = "1.00",
    ) -> PreferenceSnapshot:
        """
        Read all converter preferences at once.

        Args:
            default_from: Source currency when none is stored
            default_to: Target currency when none is stored
            default_amount: Amount text when none is stored

        Returns:
            PreferenceSnapshot, exchange_rates is None when no table is stored
        """
        group = self._load_group()

        def pick(key: str, default: Optional[str]) -> Optional[str]:
            value = self._as_string(key, group.get(key))
            return default if value is None else value

        return PreferenceSnapshot(
            exchange_rates=pick(RATES_KEY, None),
            from_currency=pick(FROM_CURRENCY_KEY, default_from),
            to_currency=pick(TO_CURRENCY_KEY, default_to),
            amount=pick(AMOUNT_KEY, default_amount),
        )

    def save_strings(self, values: Mapping[str, str]) -> None:
        """
        Store several preferences in one atomic write.

        Other groups in the file are preserved.

        Args:
            values: Key/value pairs to set in this store's group
        """
        data = self._load_file()
        group = data.get(self.group)
        if not isinstance(group, dict):
            group = {}
        group.update({k: str(v) for k, v in values.items()})
        data[self.group] = group

        self.path.parent.mkdir(parents=True, exist_ok=True)
        temp_fd, temp_path = tempfile.mkstemp(
            suffix=".json.tmp",
            dir=str(self.path.parent),
            text=True,
        )
        try:
            with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(temp_path, str(self.path))
        except Exception as e:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise RuntimeError(f"Failed to save preference file: {e}") from e
        logger.debug("Saved preferences %s to %s", sorted(values), self.path)

    def save_string(self, key: str, value: str) -> None:
        """Store a single preference."""
        self.save_strings({key: value})
