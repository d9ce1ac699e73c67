"""
uihelper: convenience helpers for Qt (PySide6) preference and option screens.

Alternating list rows, theme colour lookup, file/directory pickers, table
header alignment, message and option dialogs, divider lines, radio grouping
and UI refresh.
"""

from .core.errors import DialogOptionsError, UIHelperError
from .gui.dialogs import (
    CANCEL_OPTION,
    CLOSED_OPTION,
    OK_OPTION,
    OptionDialog,
    select_dir_dialog,
    select_file_dialog,
    show_custom_dialog,
    show_tips_dialog,
)
from .gui.lists import AlternatingRowDelegate, row_background, set_list_cell_renderer
from .gui.tables import set_table_header_align
from .gui.theme import get_color, get_color_keys, log_color_keys, theme_defaults
from .gui.widgets import create_radio_group, new_divider_line, refresh_ui

__version__ = "0.1.0"

__all__ = [
    "AlternatingRowDelegate",
    "CANCEL_OPTION",
    "CLOSED_OPTION",
    "DialogOptionsError",
    "OK_OPTION",
    "OptionDialog",
    "UIHelperError",
    "create_radio_group",
    "get_color",
    "get_color_keys",
    "log_color_keys",
    "new_divider_line",
    "refresh_ui",
    "row_background",
    "select_dir_dialog",
    "select_file_dialog",
    "set_list_cell_renderer",
    "set_table_header_align",
    "show_custom_dialog",
    "show_tips_dialog",
    "theme_defaults",
]
