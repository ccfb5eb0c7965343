"""Ordered candidate file list with per-row move and remove actions."""

from typing import List, Sequence

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QScrollArea, QFrame, QSizePolicy,
)
from PyQt6.QtCore import Qt, pyqtSignal

from core.candidates import CandidateFile
from core.utils import format_file_size
from i18n import t


class _FileRow(QFrame):
    """Single row in the file list."""

    move_up_clicked = pyqtSignal(int)
    move_down_clicked = pyqtSignal(int)
    remove_clicked = pyqtSignal(int)

    def __init__(self, index: int, entry: CandidateFile, parent=None):
        super().__init__(parent)
        self._index = index
        self._entry = entry
        self.setProperty("class", "fileRow")
        self._setup_ui()

    def _setup_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(8, 4, 8, 4)
        layout.setSpacing(8)

        self._index_label = QLabel(f"{self._index + 1}.")
        self._index_label.setFixedWidth(28)
        self._index_label.setProperty("class", "fileRowIndex")
        layout.addWidget(self._index_label)

        self._name_label = QLabel(self._entry.name)
        self._name_label.setProperty("class", "fileName")
        self._name_label.setToolTip(self._entry.path)
        self._name_label.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)
        self._name_label.setMinimumWidth(100)
        layout.addWidget(self._name_label, 1)

        self._size_label = QLabel(format_file_size(self._entry.size_bytes))
        self._size_label.setProperty("class", "fileRowSize")
        self._size_label.setFixedWidth(70)
        layout.addWidget(self._size_label)

        up_btn = self._action_button("▲", t("file_list.move_up"), "rowAction")
        up_btn.clicked.connect(lambda: self.move_up_clicked.emit(self._index))
        layout.addWidget(up_btn)

        down_btn = self._action_button("▼", t("file_list.move_down"), "rowAction")
        down_btn.clicked.connect(lambda: self.move_down_clicked.emit(self._index))
        layout.addWidget(down_btn)

        remove_btn = self._action_button("✕", t("common.remove"), "rowActionRemove")
        remove_btn.clicked.connect(lambda: self.remove_clicked.emit(self._index))
        layout.addWidget(remove_btn)

    @staticmethod
    def _action_button(text: str, tooltip: str, css_class: str) -> QPushButton:
        btn = QPushButton(text)
        btn.setProperty("class", css_class)
        btn.setFixedSize(28, 28)
        btn.setToolTip(tooltip)
        btn.setCursor(Qt.CursorShape.PointingHandCursor)
        return btn


class FileListWidget(QWidget):
    """
    Renders the candidate list. Owns no state of its own: every action is
    emitted as a request and the caller pushes the new list back with set_files().
    """

    remove_requested = pyqtSignal(int)
    move_up_requested = pyqtSignal(int)
    move_down_requested = pyqtSignal(int)
    clear_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._entries: List[CandidateFile] = []
        self._rows: List[_FileRow] = []
        self.setObjectName("fileListWidget")
        self._setup_ui()

    def _setup_ui(self):
        outer_layout = QVBoxLayout(self)
        outer_layout.setContentsMargins(0, 0, 0, 0)
        outer_layout.setSpacing(4)

        # Header: count + clear all
        self._header = QWidget()
        header_layout = QHBoxLayout(self._header)
        header_layout.setContentsMargins(0, 0, 0, 0)

        self._count_label = QLabel()
        self._count_label.setProperty("class", "fileListHeader")
        header_layout.addWidget(self._count_label)
        header_layout.addStretch()

        self._clear_btn = QPushButton(t("file_list.clear_all"))
        self._clear_btn.setProperty("class", "secondaryButton")
        self._clear_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self._clear_btn.clicked.connect(self.clear_requested.emit)
        header_layout.addWidget(self._clear_btn)

        outer_layout.addWidget(self._header)

        self._scroll = QScrollArea()
        self._scroll.setWidgetResizable(True)
        self._scroll.setFrameShape(QScrollArea.Shape.NoFrame)
        self._scroll.setMaximumHeight(256)

        self._container = QWidget()
        self._list_layout = QVBoxLayout(self._container)
        self._list_layout.setContentsMargins(0, 0, 0, 0)
        self._list_layout.setSpacing(0)
        self._list_layout.addStretch()

        self._scroll.setWidget(self._container)
        outer_layout.addWidget(self._scroll)

        self._update_visibility()

    def _update_visibility(self):
        has_files = len(self._entries) > 0
        self._header.setVisible(has_files)
        self._scroll.setVisible(has_files)
        self._count_label.setText(t("file_list.selected", count=len(self._entries)))

    def set_files(self, files: Sequence[CandidateFile]):
        """Replace the displayed list."""
        self._entries = list(files)
        self._rebuild_rows()

    def count(self) -> int:
        return len(self._entries)

    def row_count(self) -> int:
        return len(self._rows)

    def _rebuild_rows(self):
        """Rebuild all row widgets from entries."""
        for row in self._rows:
            self._list_layout.removeWidget(row)
            row.deleteLater()
        self._rows.clear()

        for i, entry in enumerate(self._entries):
            row = _FileRow(i, entry)
            row.move_up_clicked.connect(self.move_up_requested.emit)
            row.move_down_clicked.connect(self.move_down_requested.emit)
            row.remove_clicked.connect(self.remove_requested.emit)
            self._list_layout.insertWidget(i, row)
            self._rows.append(row)

        self._update_visibility()
