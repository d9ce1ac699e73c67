"""
Configuration defaults for uihelper.

This module provides the default configuration values and the application
identifiers used by QSettings.
"""

from typing import Any

from PySide6.QtCore import QCoreApplication

# Application identifiers for QSettings
APP_ORGANIZATION = "uihelper"
APP_NAME = "UIHelper"

# Settings group so helper keys never collide with the host application's own keys
SETTINGS_GROUP = "uihelper"

DEFAULT_TIPS_TITLE = "Tips"

# Default configuration with all supported keys and JSON-serializable types
DEFAULT_CONFIG: dict[str, Any] = {
    # Dialog settings
    "tips_title": DEFAULT_TIPS_TITLE,
    "use_native_dialogs": True,
    # Logging settings
    "log_level": "INFO",  # Options: "DEBUG", "INFO", "WARNING", "ERROR"
    "log_file": "",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def setup_qsettings() -> None:
    """
    Set the application-wide organization and application names.

    For applications that own their QApplication, such as the demo window.
    Helper functions never call this.

    Identifiers already set by a host application are left alone.
    """
    if not QCoreApplication.organizationName():
        QCoreApplication.setOrganizationName(APP_ORGANIZATION)
    if not QCoreApplication.applicationName():
        QCoreApplication.setApplicationName(APP_NAME)
