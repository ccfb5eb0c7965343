"""Card shown after a merged file has been saved."""

import os
from PyQt6.QtWidgets import (
    QWidget, QHBoxLayout, QVBoxLayout, QLabel, QPushButton,
)
from PyQt6.QtCore import pyqtSignal, QUrl
from PyQt6.QtGui import QDesktopServices

from core.utils import format_file_size
from i18n import t


class ResultCard(QWidget):
    """Shows where the merged PDF was saved, with open actions."""

    merge_another = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._output_path = ""
        self._setup_ui()
        self.hide()

    def _setup_ui(self):
        self.setObjectName("resultCard")
        layout = QVBoxLayout(self)

        self._title_label = QLabel(t("result.title"))
        self._title_label.setProperty("class", "resultTitle")
        layout.addWidget(self._title_label)

        self._saved_label = QLabel()
        self._saved_label.setProperty("class", "resultValue")
        self._saved_label.setWordWrap(True)
        layout.addWidget(self._saved_label)

        btn_row = QHBoxLayout()

        self._open_file_btn = QPushButton(t("result.open_file"))
        self._open_file_btn.setProperty("class", "secondaryButton")
        self._open_file_btn.clicked.connect(self._open_file)
        btn_row.addWidget(self._open_file_btn)

        self._open_folder_btn = QPushButton(t("result.open_folder"))
        self._open_folder_btn.setProperty("class", "secondaryButton")
        self._open_folder_btn.clicked.connect(self._open_folder)
        btn_row.addWidget(self._open_folder_btn)

        self._another_btn = QPushButton(t("result.merge_another"))
        self._another_btn.setProperty("class", "secondaryButton")
        self._another_btn.clicked.connect(self.merge_another.emit)
        btn_row.addWidget(self._another_btn)

        btn_row.addStretch()
        layout.addLayout(btn_row)

    def show_saved(self, output_path: str):
        """Populate and show the card for a saved file."""
        self._output_path = output_path
        size = os.path.getsize(output_path) if os.path.exists(output_path) else 0
        self._saved_label.setText(
            t("result.saved", name=os.path.basename(output_path), size=format_file_size(size))
        )
        self._open_file_btn.setVisible(os.path.isfile(output_path))
        self.show()

    def output_path(self) -> str:
        return self._output_path

    def _open_file(self):
        if self._output_path and os.path.exists(self._output_path):
            QDesktopServices.openUrl(QUrl.fromLocalFile(self._output_path))

    def _open_folder(self):
        if self._output_path:
            QDesktopServices.openUrl(QUrl.fromLocalFile(os.path.dirname(self._output_path)))

    def reset(self):
        self._output_path = ""
        self.hide()
