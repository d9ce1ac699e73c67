"""
Theme colour enumeration.

The application palette plays the role of a look-and-feel defaults table:
every (colour group, colour role) pair becomes a key such as ``"Active.Base"``.
"""

import logging
from collections.abc import Mapping
from typing import Any

from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QApplication

logger = logging.getLogger(__name__)

# Light grey used for divider lines
DIVIDER_COLOR = QColor(192, 192, 192)

_COLOR_GROUPS = (
    QPalette.ColorGroup.Active,
    QPalette.ColorGroup.Inactive,
    QPalette.ColorGroup.Disabled,
)
_SKIPPED_ROLES = ("NoRole", "NColorRoles")


def color_key(group: QPalette.ColorGroup, role: QPalette.ColorRole) -> str:
    """Return the theme key for a palette colour, e.g. ``"Active.Base"``."""
    return f"{group.name}.{role.name}"


def theme_defaults(palette: QPalette | None = None) -> dict[str, QColor]:
    """
    Build the theme defaults table from a palette.

    Args:
        palette: Palette to read; the application palette when None

    Returns:
        Mapping of theme keys to colours
    """
    if palette is None:
        palette = QApplication.palette()

    defaults: dict[str, QColor] = {}
    for group in _COLOR_GROUPS:
        for role in QPalette.ColorRole:
            if role.name in _SKIPPED_ROLES:
                continue
            defaults[color_key(group, role)] = palette.color(group, role)
    return defaults


def _is_color(value: Any) -> bool:
    return isinstance(value, QColor) and value.isValid()


def get_color_keys(defaults: Mapping[Any, Any] | None = None) -> list[str]:
    """
    Get every theme key bound to a colour.

    Args:
        defaults: Theme defaults table; built from the application palette when None

    Returns:
        Sorted, duplicate-free list of keys whose value is a valid colour
    """
    if defaults is None:
        defaults = theme_defaults()
    return sorted({str(key) for key, value in defaults.items() if _is_color(value)})


def get_color(key: str, defaults: Mapping[Any, Any] | None = None) -> QColor | None:
    """Look up a theme colour, returning None when the key is absent or not a colour."""
    if defaults is None:
        defaults = theme_defaults()
    value = defaults.get(key)
    return value if _is_color(value) else None


def log_color_keys(defaults: Mapping[Any, Any] | None = None) -> None:
    """Log every theme colour value at debug level."""
    if defaults is None:
        defaults = theme_defaults()
    for key in get_color_keys(defaults):
        color = get_color(key, defaults)
        if color is None:
            # Keys are stringified, so a non-string key may not resolve back
            continue
        logger.debug("%s, [r=%s, g=%s, b=%s]", key, color.red(), color.green(), color.blue())
