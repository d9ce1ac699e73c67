"""
Modal dialog helpers.

File and directory pickers that fall back to a default path on cancel, an
informational tips dialog, and an option dialog that embeds a caller-supplied
widget above a row of buttons and reports which one was clicked.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from pathlib import Path

from PySide6.QtWidgets import (
    QApplication,
    QDialog,
    QDialogButtonBox,
    QFileDialog,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from uihelper.core.config_manager import ConfigManager
from uihelper.core.errors import DialogOptionsError

logger = logging.getLogger(__name__)

# Option indices returned by show_custom_dialog, in button order (OK first, Cancel second)
OK_OPTION = 0
CANCEL_OPTION = 1
CLOSED_OPTION = -1

OK_CANCEL_OPTIONS = ("OK", "Cancel")


def _dialog_parent(parent: QWidget | None) -> QWidget | None:
    return parent if parent is not None else QApplication.activeWindow()


def _file_dialog_options(extra: QFileDialog.Option | None = None) -> QFileDialog.Option:
    options = QFileDialog.Option(0)
    if extra is not None:
        options |= extra
    if not ConfigManager().get("use_native_dialogs"):
        options |= QFileDialog.Option.DontUseNativeDialog
    return options


def select_file_dialog(title: str, default_file: str | os.PathLike[str], parent: QWidget | None = None) -> str:
    """
    Show a file chooser.

    Args:
        title: Dialog title
        default_file: File preselected in the dialog
        parent: Parent widget (the active window when None)

    Returns:
        Path of the chosen file, or ``default_file`` unchanged if cancelled
    """
    default_text = default_file if isinstance(default_file, str) else os.fspath(default_file)
    selected, _ = QFileDialog.getOpenFileName(
        _dialog_parent(parent), title, default_text, options=_file_dialog_options()
    )

    # Handle cancellation (empty string)
    if not selected:
        logger.debug(f"File selection cancelled, keeping {default_text}")
        return default_text

    return str(Path(selected))


def select_dir_dialog(title: str, default_dir: str | os.PathLike[str], parent: QWidget | None = None) -> str:
    """
    Show a directory chooser.

    Args:
        title: Dialog title
        default_dir: Directory preselected in the dialog
        parent: Parent widget (the active window when None)

    Returns:
        Path of the chosen directory, or ``default_dir`` unchanged if cancelled
    """
    default_text = default_dir if isinstance(default_dir, str) else os.fspath(default_dir)
    selected = QFileDialog.getExistingDirectory(
        _dialog_parent(parent), title, default_text, options=_file_dialog_options(QFileDialog.Option.ShowDirsOnly)
    )

    if not selected:
        logger.debug(f"Directory selection cancelled, keeping {default_text}")
        return default_text

    return str(Path(selected))


def show_tips_dialog(message: str, title: str | None = None, parent: QWidget | None = None) -> None:
    """
    Show an informational dialog with a single OK button.

    Args:
        message: Text to show
        title: Dialog title; the configured ``tips_title`` when None
        parent: Parent widget (the active window when None)
    """
    if title is None:
        title = ConfigManager().get("tips_title")

    msg_box = QMessageBox(_dialog_parent(parent))
    msg_box.setWindowTitle(title)
    msg_box.setText(message)
    msg_box.setIcon(QMessageBox.Icon.Information)
    msg_box.setStandardButtons(QMessageBox.StandardButton.Ok)
    msg_box.exec()


class OptionDialog(QDialog):
    """
    Dialog showing a custom widget above one button per option.

    The index of the clicked option is available as :attr:`chosen_index`
    after the dialog closes; it stays ``CLOSED_OPTION`` when the dialog was
    dismissed without clicking a button.
    """

    def __init__(
        self,
        title: str,
        content: QWidget,
        options: Sequence[str] = OK_CANCEL_OPTIONS,
        parent: QWidget | None = None,
    ) -> None:
        if not options:
            raise DialogOptionsError()

        super().__init__(parent)
        self.setWindowTitle(title)
        self.setModal(True)

        self._chosen_index = CLOSED_OPTION
        self._buttons: list[QPushButton] = []

        layout = QVBoxLayout(self)
        layout.addWidget(content)

        self._button_box = QDialogButtonBox(self)
        for i, text in enumerate(options):
            button = self._button_box.addButton(str(text), QDialogButtonBox.ButtonRole.ActionRole)
            button.clicked.connect(lambda _checked=False, i=i: self._on_option_clicked(i))
            self._buttons.append(button)
        layout.addWidget(self._button_box)

        # First option is the default, like a confirmation dialog's OK
        self._buttons[0].setDefault(True)
        self._buttons[0].setFocus()

    @property
    def chosen_index(self) -> int:
        """Index of the clicked option, or ``CLOSED_OPTION``."""
        return self._chosen_index

    @property
    def buttons(self) -> list[QPushButton]:
        """Option buttons in option order."""
        return list(self._buttons)

    def _on_option_clicked(self, index: int) -> None:
        self._chosen_index = index
        self.accept()


def show_custom_dialog(
    title: str,
    content: QWidget,
    options: Sequence[str] | None = None,
    parent: QWidget | None = None,
) -> int:
    """
    Show a modal dialog embedding a custom widget.

    Args:
        title: Dialog title
        content: Widget shown above the buttons
        options: Button texts; OK/Cancel when None
        parent: Parent widget (the active window when None)

    Returns:
        Index of the clicked option in button order (``OK_OPTION`` = 0 and
        ``CANCEL_OPTION`` = 1 for the OK/Cancel variant), or ``CLOSED_OPTION``
        if the dialog was closed

    Raises:
        DialogOptionsError: If ``options`` is empty
    """
    if options is None:
        options = OK_CANCEL_OPTIONS

    dialog = OptionDialog(title, content, options, _dialog_parent(parent))
    dialog.exec()

    chosen = dialog.chosen_index
    # Give the caller's widget back before the dialog is destroyed
    content.setParent(None)
    dialog.deleteLater()
    return chosen
