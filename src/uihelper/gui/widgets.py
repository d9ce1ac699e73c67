"""
Small layout widgets and widget tree helpers.
"""

import logging

from PySide6.QtGui import QPalette
from PySide6.QtWidgets import QAbstractButton, QButtonGroup, QFrame, QSizePolicy, QWidget

from .theme import DIVIDER_COLOR

logger = logging.getLogger(__name__)


def new_divider_line(parent: QWidget | None = None) -> QFrame:
    """
    Create a one pixel high divider line.

    Args:
        parent: Optional parent widget

    Returns:
        Frameless, opaque, horizontally expanding light grey widget
    """
    line = QFrame(parent)
    line.setObjectName("dividerLine")
    line.setFrameShape(QFrame.Shape.NoFrame)
    line.setFixedHeight(1)
    line.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)

    palette = line.palette()
    palette.setColor(QPalette.ColorRole.Window, DIVIDER_COLOR)
    line.setPalette(palette)
    line.setAutoFillBackground(True)
    return line


def _common_ancestor(widgets: list[QAbstractButton]) -> QWidget | None:
    ancestor = widgets[0].parentWidget()
    while ancestor is not None and not all(ancestor.isAncestorOf(widget) for widget in widgets):
        ancestor = ancestor.parentWidget()
    return ancestor


def create_radio_group(*buttons: QAbstractButton | None) -> QButtonGroup | None:
    """
    Make buttons mutually exclusive.

    The group is parented to the nearest widget containing every button, so
    deleting one button leaves the rest grouped. Buttons without a shared
    ancestor get the group parented to the first button; deleting that button
    deletes the group and the others lose exclusivity. None entries are skipped.

    Args:
        buttons: One or more radio buttons

    Returns:
        The button group, or None if there was nothing to group
    """
    present = [button for button in buttons if button is not None]
    if not present:
        return None

    owner = _common_ancestor(present)
    if owner is None:
        owner = present[0]

    group = QButtonGroup(owner)
    group.setExclusive(True)
    for button in present:
        group.addButton(button)
    return group


def refresh_ui(widget: QWidget | None, restyle: bool = False) -> None:
    """
    Force a widget to recompute its layout and repaint.

    Args:
        widget: Root of the subtree to refresh
        restyle: Also re-polish the widget's style, picking up palette or
            stylesheet changes
    """
    if widget is None:
        return

    if restyle:
        widget.style().unpolish(widget)
        widget.style().polish(widget)

    layout = widget.layout()
    if layout is not None:
        layout.invalidate()
        layout.activate()
    widget.updateGeometry()
    widget.update()
