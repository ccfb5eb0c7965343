"""PDF Merge page widget."""

import logging
import os
from typing import Optional

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QScrollArea, QGroupBox,
)
from PyQt6.QtCore import QSettings, QStandardPaths

from core.config import ORG_NAME, APP_NAME
from core.download import save_download
from core.merge_client import MergeClient
from core.session import MergeSession, SessionMessages
from ui.components.drop_zone import DropZone
from ui.components.error_banner import ErrorBanner
from ui.components.file_list_widget import FileListWidget
from ui.components.progress_widget import ProgressWidget
from ui.components.result_card import ResultCard
from workers.merge_worker import MergeWorker
from i18n import t

logger = logging.getLogger(__name__)


def default_download_dir() -> str:
    """Configured output folder, else the platform Downloads folder, else home."""
    settings = QSettings(ORG_NAME, APP_NAME)
    folder = settings.value("output_folder", "")
    if folder:
        return folder
    downloads = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.DownloadLocation)
    return downloads or os.path.expanduser("~")


class MergeWidget(QWidget):
    """Merge page: drop PDFs, reorder, send to the merge service, save the result."""

    def __init__(self, client: MergeClient, parent=None):
        super().__init__(parent)
        self._client = client
        self._worker: Optional[MergeWorker] = None
        self._session = MergeSession(
            on_changed=self._on_session_changed,
            on_error=self._on_session_error,
            messages=SessionMessages(
                only_pdf=t("intake.only_pdf"), no_files=t("merge.no_files"),
            ),
        )
        self._setup_ui()
        self._connect_signals()
        self._on_session_changed()

    @property
    def session(self) -> MergeSession:
        return self._session

    def _setup_ui(self):
        scroll = QScrollArea(self)
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QScrollArea.Shape.NoFrame)

        container = QWidget()
        layout = QVBoxLayout(container)
        layout.setContentsMargins(32, 24, 32, 24)
        layout.setSpacing(16)

        title = QLabel(t("merge.title"))
        title.setProperty("class", "sectionTitle")
        layout.addWidget(title)

        subtitle = QLabel(t("merge.subtitle"))
        subtitle.setProperty("class", "sectionSubtitle")
        subtitle.setWordWrap(True)
        layout.addWidget(subtitle)

        self._drop_zone = DropZone()
        layout.addWidget(self._drop_zone)

        self._file_list = FileListWidget()
        layout.addWidget(self._file_list)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self._merge_btn = QPushButton(t("merge.button"))
        self._merge_btn.setObjectName("primaryButton")
        self._merge_btn.setEnabled(False)
        button_row.addWidget(self._merge_btn)
        layout.addLayout(button_row)

        self._progress = ProgressWidget()
        layout.addWidget(self._progress)

        self._error_banner = ErrorBanner()
        layout.addWidget(self._error_banner)

        self._result_card = ResultCard()
        layout.addWidget(self._result_card)

        # How it works
        steps_group = QGroupBox(t("merge.how_title"))
        steps_layout = QVBoxLayout(steps_group)
        for i in range(1, 5):
            step = QLabel(f"{i}. {t(f'merge.how_step{i}')}")
            step.setWordWrap(True)
            step.setProperty("class", "textSecondary")
            steps_layout.addWidget(step)
        layout.addWidget(steps_group)

        layout.addStretch()

        scroll.setWidget(container)

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.addWidget(scroll)

    def _connect_signals(self):
        self._drop_zone.files_dropped.connect(self.add_paths)
        self._file_list.remove_requested.connect(self._session.remove_file)
        self._file_list.move_up_requested.connect(self._session.move_up)
        self._file_list.move_down_requested.connect(self._session.move_down)
        self._file_list.clear_requested.connect(self._session.clear_all)
        self._merge_btn.clicked.connect(self.start_merge)
        self._error_banner.dismissed.connect(self._session.dismiss_error)
        self._result_card.merge_another.connect(self._result_card.reset)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def add_paths(self, paths):
        if paths:
            self._result_card.reset()
            self._session.add_paths(paths)

    def browse_files(self):
        self._drop_zone.browse_files()

    def clear_all(self):
        self._session.clear_all()

    def start_merge(self):
        files = self._session.begin_merge()
        if files is None:
            return

        self._result_card.reset()
        self._progress.start(t("progress.uploading_count", count=len(files)))

        self._worker = MergeWorker(self._client, files)
        self._worker.finished.connect(self._on_merge_finished)
        self._worker.error.connect(self._on_merge_error)
        self._worker.start()

    # ------------------------------------------------------------------
    # Worker results
    # ------------------------------------------------------------------

    def _on_merge_finished(self, payload: bytes):
        self._progress.reset()
        self._release_worker()
        saved_path = self._session.complete_merge(
            payload, lambda data, name: save_download(data, name, default_download_dir()),
        )
        if saved_path:
            self._result_card.show_saved(saved_path)

    def _on_merge_error(self, error_msg: str):
        self._progress.reset()
        self._release_worker()
        self._session.fail_merge(error_msg)

    def _release_worker(self):
        if self._worker:
            # run() has already emitted its result; let the thread return
            self._worker.wait()
            self._worker.deleteLater()
        self._worker = None

    # ------------------------------------------------------------------
    # Session callbacks
    # ------------------------------------------------------------------

    def _on_session_changed(self):
        files = self._session.files
        self._file_list.set_files(files)
        self._drop_zone.set_file_count(len(files))
        self._merge_btn.setEnabled(self._session.can_merge)
        self._merge_btn.setText(
            t("merge.processing") if self._session.in_flight else t("merge.button")
        )

    def _on_session_error(self, message: Optional[str]):
        if message:
            self._error_banner.show_error(message)
        else:
            self._error_banner.clear()

    def cleanup(self):
        if self._worker and self._worker.isRunning():
            if not self._worker.wait(5000):
                logger.warning("Merge request still running at shutdown; terminating")
                self._worker.terminate()
                self._worker.wait(2000)
        self._worker = None
