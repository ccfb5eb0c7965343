"""Single-slot error banner that hides itself after a short delay."""

from PyQt6.QtWidgets import QFrame, QHBoxLayout, QLabel, QPushButton
from PyQt6.QtCore import Qt, QTimer, pyqtSignal

ERROR_TIMEOUT_MS = 3000


class ErrorBanner(QFrame):
    """
    Shows one error message at a time. A new message replaces the old one and
    restarts the countdown. Hidden by default.
    """

    dismissed = pyqtSignal()

    def __init__(self, timeout_ms: int = ERROR_TIMEOUT_MS, parent=None):
        super().__init__(parent)
        self._message = ""
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(timeout_ms)
        self._timer.timeout.connect(self.clear)
        self.setObjectName("errorBanner")
        self._setup_ui()
        self.hide()

    def _setup_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 8, 8, 8)

        icon = QLabel("✕")
        icon.setProperty("class", "errorIcon")
        layout.addWidget(icon)

        self._label = QLabel()
        self._label.setWordWrap(True)
        self._label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        layout.addWidget(self._label, 1)

        close_btn = QPushButton("×")
        close_btn.setProperty("class", "rowAction")
        close_btn.setFixedSize(24, 24)
        close_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        close_btn.clicked.connect(self.clear)
        layout.addWidget(close_btn)

    def show_error(self, message: str):
        self._message = message
        self._label.setText(message)
        self.show()
        self._timer.start()

    def clear(self):
        was_showing = bool(self._message)
        self._timer.stop()
        self._message = ""
        self._label.setText("")
        self.hide()
        if was_showing:
            self.dismissed.emit()

    def message(self) -> str:
        return self._message

    def is_counting_down(self) -> bool:
        return self._timer.isActive()
