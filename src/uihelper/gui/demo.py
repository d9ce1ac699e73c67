"""
Preview window for the uihelper widgets and dialogs.

Run with ``uihelper-demo`` (or ``python run.py`` from a checkout) to see every
helper applied to real widgets.
"""

import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QMainWindow,
    QPushButton,
    QRadioButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from uihelper.core.config import setup_qsettings
from uihelper.core.logging_setup import init_logging
from uihelper.gui.dialogs import OK_OPTION, select_dir_dialog, select_file_dialog, show_custom_dialog, show_tips_dialog
from uihelper.gui.lists import set_list_cell_renderer
from uihelper.gui.tables import set_table_header_align
from uihelper.gui.theme import log_color_keys
from uihelper.gui.widgets import create_radio_group, new_divider_line, refresh_ui

logger = logging.getLogger(__name__)


class DemoWindow(QMainWindow):
    """Main window laying out one sample of each helper."""

    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("uihelper preview")
        self.resize(640, 520)

        central = QWidget()
        main_layout = QVBoxLayout(central)
        main_layout.setContentsMargins(12, 12, 12, 12)
        main_layout.setSpacing(10)

        self.list_widget = QListWidget()
        self.list_widget.setObjectName("demoList")
        self.list_widget.addItems([f"Rule {i + 1}" for i in range(8)])
        set_list_cell_renderer(self.list_widget)
        main_layout.addWidget(self.list_widget)

        main_layout.addWidget(new_divider_line())

        self.table = QTableWidget(3, 2)
        self.table.setHorizontalHeaderLabels(["Name", "Value"])
        for row in range(3):
            self.table.setItem(row, 0, QTableWidgetItem(f"key{row}"))
            self.table.setItem(row, 1, QTableWidgetItem(f"value{row}"))
        set_table_header_align(self.table, "left")
        main_layout.addWidget(self.table)

        main_layout.addWidget(new_divider_line())

        radio_row = QHBoxLayout()
        self.radio_buttons = [QRadioButton(text) for text in ("Request", "Response", "Both")]
        self.radio_buttons[0].setChecked(True)
        for button in self.radio_buttons:
            radio_row.addWidget(button)
        radio_row.addStretch()
        main_layout.addLayout(radio_row)
        self.radio_group = create_radio_group(*self.radio_buttons)

        self.path_edit = QLineEdit(str(Path.home()))
        main_layout.addWidget(self.path_edit)

        button_row = QHBoxLayout()
        for text, slot in (
            ("Choose file…", self.on_choose_file),
            ("Choose folder…", self.on_choose_dir),
            ("Tips", self.on_tips),
            ("Custom…", self.on_custom),
            ("Log colors", self.on_log_colors),
        ):
            button = QPushButton(text)
            button.clicked.connect(slot)
            button_row.addWidget(button)
        main_layout.addLayout(button_row)

        self.setCentralWidget(central)

    def on_choose_file(self) -> None:
        self.path_edit.setText(select_file_dialog("Select File", self.path_edit.text(), self))

    def on_choose_dir(self) -> None:
        self.path_edit.setText(select_dir_dialog("Select Folder", self.path_edit.text(), self))

    def on_tips(self) -> None:
        show_tips_dialog(f"Current path:\n{self.path_edit.text()}", parent=self)

    def on_custom(self) -> None:
        editor = QLineEdit(self.path_edit.text())
        content = QWidget()
        layout = QVBoxLayout(content)
        layout.addWidget(QLabel("Path:"))
        layout.addWidget(editor)

        if show_custom_dialog("Edit Path", content, parent=self) == OK_OPTION:
            self.path_edit.setText(editor.text())
            refresh_ui(self.centralWidget())

    def on_log_colors(self) -> None:
        log_color_keys()


def main() -> int:
    """Demo entry point."""
    app = QApplication(sys.argv)
    setup_qsettings()
    init_logging()

    window = DemoWindow()
    window.show()
    logger.info("Preview window shown")

    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
