"""
Configuration manager for uihelper.

Provides QSettings-backed configuration management with default fallbacks
and type safety. All keys live under the ``uihelper/`` settings group so the
host application's own settings are never touched.
"""

import logging
from typing import Any

from PySide6.QtCore import QSettings

from .config import APP_NAME, APP_ORGANIZATION, DEFAULT_CONFIG, LOG_LEVELS, SETTINGS_GROUP

logger = logging.getLogger(__name__)

_TRUE_STRINGS = ("true", "1", "yes", "on")


def _settings_key(key: str) -> str:
    return f"{SETTINGS_GROUP}/{key}"


class ConfigManager:
    """
    QSettings-backed configuration manager with robust defaults.

    Provides type-safe access to configuration values with automatic
    fallback to defaults when keys are missing or have invalid types.
    """

    def __init__(self) -> None:
        """Initialize the ConfigManager with QSettings."""
        # Explicit identifiers; QCoreApplication names belong to the host application
        self._settings = QSettings(APP_ORGANIZATION, APP_NAME)
        self._defaults = DEFAULT_CONFIG.copy()

    def get(self, key: str, default: Any | None = None) -> Any:
        """
        Get a configuration value with fallback to defaults.

        Args:
            key: Configuration key
            default: Override default value (if None, uses DEFAULT_CONFIG)

        Returns:
            Configuration value with type coercion and default fallback
        """
        fallback = default if default is not None else self._defaults.get(key)

        value = self._settings.value(_settings_key(key), fallback)

        if fallback is not None:
            try:
                expected_type = type(fallback)
                if expected_type is bool:
                    # QSettings returns strings for booleans from INI/registry backends
                    value = value.lower() in _TRUE_STRINGS if isinstance(value, str) else bool(value)
                elif expected_type in (int, float, str):
                    value = expected_type(value)
                elif not isinstance(value, expected_type):
                    logger.warning(f"Config key '{key}' has unexpected type, using default")
                    value = fallback
            except (ValueError, TypeError) as e:
                logger.warning(f"Failed to coerce config key '{key}': {e}, using default")
                value = fallback

        if key == "log_level" and value not in LOG_LEVELS:
            logger.warning(f"Unsupported log level '{value}', using default")
            value = self._defaults["log_level"]

        return value

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value.

        Args:
            key: Configuration key
            value: Value to store (must be JSON-serializable)
        """
        if key not in self._defaults:
            logger.warning(f"Unknown config key '{key}', skipping")
            return
        self._settings.setValue(_settings_key(key), value)
        self._settings.sync()

    def load_all(self) -> dict[str, Any]:
        """
        Load all configuration values merged with defaults.

        Returns:
            Dictionary with all configuration keys
        """
        config = self._defaults.copy()
        for key in config:
            stored_value = self.get(key)
            if stored_value is not None:
                config[key] = stored_value
        return config

    def reset_to_defaults(self) -> None:
        """Remove every stored uihelper key, reverting to defaults."""
        self._settings.remove(SETTINGS_GROUP)
        self._settings.sync()

        logger.info("Configuration reset to defaults")

    def has_key(self, key: str) -> bool:
        """Check if a configuration key exists in storage."""
        return self._settings.contains(_settings_key(key))
