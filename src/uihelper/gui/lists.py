"""
Alternating row colouring for item views.

The view's existing delegate keeps doing all the rendering; the wrapper only
fills the row background first, so selected rows look exactly as the wrapped
delegate draws them.
"""

import logging

from PySide6.QtCore import QAbstractItemModel, QEvent, QModelIndex, QObject, QPersistentModelIndex, QSize
from PySide6.QtGui import QColor, QHelpEvent, QPainter, QPalette
from PySide6.QtWidgets import (
    QAbstractItemDelegate,
    QAbstractItemView,
    QStyle,
    QStyleOptionViewItem,
    QWidget,
)

logger = logging.getLogger(__name__)

EVEN_ROW_ROLE = QPalette.ColorRole.Base
ODD_ROW_ROLE = QPalette.ColorRole.AlternateBase


def row_background(row: int, selected: bool, palette: QPalette) -> QColor | None:
    """
    Get the background colour for a row.

    Args:
        row: Display row index
        selected: Whether the row is selected
        palette: Palette supplying the theme colours

    Returns:
        The even or odd row colour, or None for selected rows
    """
    if selected:
        return None
    role = EVEN_ROW_ROLE if row % 2 == 0 else ODD_ROW_ROLE
    return palette.color(role)


class AlternatingRowDelegate(QAbstractItemDelegate):
    """Delegate that paints alternating row backgrounds and forwards everything else."""

    def __init__(self, wrapped: QAbstractItemDelegate, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._wrapped = wrapped

        # Editors created by the wrapped delegate report through its signals
        wrapped.commitData.connect(self.commitData)
        wrapped.closeEditor.connect(self.closeEditor)
        wrapped.sizeHintChanged.connect(self.sizeHintChanged)

    @property
    def wrapped(self) -> QAbstractItemDelegate:
        """The delegate doing the actual rendering."""
        return self._wrapped

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        # The view installs this wrapper as the editor's event filter, so key
        # commit/cancel and focus-out handling must come from the wrapped delegate
        return self._wrapped.eventFilter(obj, event)

    def paint(self, painter: QPainter, option: QStyleOptionViewItem, index: QModelIndex) -> None:
        selected = bool(option.state & QStyle.StateFlag.State_Selected)
        color = row_background(index.row(), selected, option.palette)
        if color is not None:
            painter.fillRect(option.rect, color)
        self._wrapped.paint(painter, option, index)

    def sizeHint(self, option: QStyleOptionViewItem, index: QModelIndex) -> QSize:
        return self._wrapped.sizeHint(option, index)

    def createEditor(self, parent: QWidget, option: QStyleOptionViewItem, index: QModelIndex) -> QWidget:
        return self._wrapped.createEditor(parent, option, index)

    def destroyEditor(self, editor: QWidget, index: QModelIndex) -> None:
        self._wrapped.destroyEditor(editor, index)

    def setEditorData(self, editor: QWidget, index: QModelIndex) -> None:
        self._wrapped.setEditorData(editor, index)

    def setModelData(self, editor: QWidget, model: QAbstractItemModel, index: QModelIndex) -> None:
        self._wrapped.setModelData(editor, model, index)

    def updateEditorGeometry(self, editor: QWidget, option: QStyleOptionViewItem, index: QModelIndex) -> None:
        self._wrapped.updateEditorGeometry(editor, option, index)

    def editorEvent(
        self,
        event: QEvent,
        model: QAbstractItemModel,
        option: QStyleOptionViewItem,
        index: QModelIndex | QPersistentModelIndex,
    ) -> bool:
        return self._wrapped.editorEvent(event, model, option, index)

    def helpEvent(
        self,
        event: QHelpEvent,
        view: QAbstractItemView,
        option: QStyleOptionViewItem,
        index: QModelIndex | QPersistentModelIndex,
    ) -> bool:
        return self._wrapped.helpEvent(event, view, option, index)


def set_list_cell_renderer(list_view: QAbstractItemView | None) -> None:
    """
    Give a list view alternating row backgrounds.

    Args:
        list_view: The view to decorate; nothing happens if it or its
            current delegate is missing
    """
    if list_view is None or list_view.itemDelegate() is None:
        return

    delegate = AlternatingRowDelegate(list_view.itemDelegate(), list_view)
    list_view.setItemDelegate(delegate)
    logger.debug(f"Installed alternating row delegate on {list_view.objectName() or type(list_view).__name__}")
