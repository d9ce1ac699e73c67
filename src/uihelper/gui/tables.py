"""
Table header alignment.
"""

import logging

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHeaderView, QTableView

logger = logging.getLogger(__name__)

ALIGN_NAMES: dict[str, Qt.AlignmentFlag] = {
    "left": Qt.AlignmentFlag.AlignLeft,
    "right": Qt.AlignmentFlag.AlignRight,
    "top": Qt.AlignmentFlag.AlignTop,
    "bottom": Qt.AlignmentFlag.AlignBottom,
    "center": Qt.AlignmentFlag.AlignCenter,
}

_HORIZONTAL = (Qt.AlignmentFlag.AlignLeft, Qt.AlignmentFlag.AlignRight)
_VERTICAL = (Qt.AlignmentFlag.AlignTop, Qt.AlignmentFlag.AlignBottom)


def _resolve_align(align: Qt.AlignmentFlag | str) -> Qt.AlignmentFlag | None:
    if isinstance(align, str):
        return ALIGN_NAMES.get(align.strip().lower())
    return align


def set_table_header_align(table: QTableView | None, align: Qt.AlignmentFlag | str) -> None:
    """
    Align the labels of a table's horizontal header.

    Left/right change only the horizontal alignment, top/bottom only the
    vertical one, center changes both. Any other value leaves the header as is.

    Args:
        table: Table whose header is aligned
        align: Alignment flag or its name ("left", "right", "top", "bottom", "center")
    """
    if table is None:
        return
    header = table.horizontalHeader()
    if not isinstance(header, QHeaderView):
        return

    flag = _resolve_align(align)
    current = header.defaultAlignment()

    if flag in _HORIZONTAL:
        new_align = (current & Qt.AlignmentFlag.AlignVertical_Mask) | flag
    elif flag in _VERTICAL:
        new_align = (current & Qt.AlignmentFlag.AlignHorizontal_Mask) | flag
    elif flag == Qt.AlignmentFlag.AlignCenter:
        new_align = Qt.AlignmentFlag.AlignCenter
    else:
        logger.debug(f"Ignoring unsupported header alignment {align!r}")
        return

    header.setDefaultAlignment(new_align)
    header.viewport().update()
