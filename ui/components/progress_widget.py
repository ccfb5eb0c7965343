"""Busy bar with a status message, shown while a request is in flight."""

from PyQt6.QtWidgets import QWidget, QVBoxLayout, QProgressBar, QLabel

from i18n import t


class ProgressWidget(QWidget):
    """Indeterminate progress bar + status label. Hidden by default.

    Uploads give no useful progress figures, so the bar only signals that
    something is running.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._setup_ui()
        self.hide()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 8, 0, 8)

        self._bar = QProgressBar()
        self._bar.setRange(0, 0)
        self._bar.setTextVisible(False)
        layout.addWidget(self._bar)

        self._status_label = QLabel(t("progress.uploading"))
        self._status_label.setProperty("class", "textCaption")
        layout.addWidget(self._status_label)

    def start(self, message: str = ""):
        """Show the widget in busy mode."""
        self._status_label.setText(message or t("progress.uploading"))
        self.show()

    def reset(self):
        """Hide the widget."""
        self.hide()
