"""Multi-file drag-and-drop zone widget."""

from PyQt6.QtWidgets import (
    QApplication, QWidget, QVBoxLayout, QLabel, QFileDialog,
)
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import (
    QCursor, QDragEnterEvent, QDragMoveEvent, QDropEvent, QPainter, QPen, QColor,
)

from core.drag_state import DragState, is_descendant
from i18n import t


class DropZone(QWidget):
    """
    A dashed-border zone that accepts file drops and clicks.
    Emits files_dropped(list[str]) with every local path it receives; type
    filtering is left to the caller. Stateless with respect to the file list.
    """

    files_dropped = pyqtSignal(list)
    drag_active_changed = pyqtSignal(bool)

    def __init__(self, placeholder_text: str = "", hint_text: str = "", parent=None):
        super().__init__(parent)
        self._placeholder_text = placeholder_text or t("drop_zone.placeholder")
        self._hint_text = hint_text or t("drop_zone.hint")
        self._file_count = 0
        self._drag = DragState()
        self._was_dragging = False
        self.setAcceptDrops(True)
        self.setObjectName("dropZone")
        self.setMinimumHeight(140)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self._setup_ui()

    def _setup_ui(self):
        self._layout = QVBoxLayout(self)
        self._layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._icon_label = QLabel("+")
        self._icon_label.setObjectName("dropIcon")
        self._icon_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._layout.addWidget(self._icon_label)

        self._text_label = QLabel(self._placeholder_text)
        self._text_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._text_label.setWordWrap(True)
        self._layout.addWidget(self._text_label)

        self._hint_label = QLabel(self._hint_text)
        self._hint_label.setProperty("class", "helperText")
        self._hint_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._layout.addWidget(self._hint_label)

    def is_dragging(self) -> bool:
        return self._drag.active

    def owns(self, widget) -> bool:
        """True if widget is this zone or one of its children."""
        return is_descendant(widget, self, lambda w: w.parentWidget())

    def set_file_count(self, count: int):
        """Update visual to show how many files are loaded."""
        self._file_count = count
        self._refresh()

    def dragEnterEvent(self, event: QDragEnterEvent):
        if event.mimeData().hasUrls():
            event.acceptProposedAction()
            self._set_drag(self._drag.enter())
            return
        event.ignore()

    def dragMoveEvent(self, event: QDragMoveEvent):
        if event.mimeData().hasUrls():
            event.acceptProposedAction()
            self._set_drag(self._drag.over())
            return
        event.ignore()

    def dragLeaveEvent(self, event):
        self._set_drag(self._drag.leave(self._next_drop_target(), self.owns))

    def dropEvent(self, event: QDropEvent):
        self._set_drag(self._drag.drop())
        paths = [u.toLocalFile() for u in event.mimeData().urls() if u.isLocalFile()]
        if paths:
            event.acceptProposedAction()
            self.files_dropped.emit(paths)
        else:
            event.ignore()

    def _widget_under_cursor(self):
        return QApplication.widgetAt(QCursor.pos())

    def _next_drop_target(self):
        """Widget that takes the drag over after a leave, or None if the drag ended.

        Qt hands a drag to the nearest widget that accepts drops, so hovering a
        plain child label never leaves the zone. When that nearest widget is the
        zone itself the pointer has not moved anywhere: the drag was cancelled.
        """
        widget = self._widget_under_cursor()
        while widget is not None and not widget.acceptDrops():
            widget = widget.parentWidget()
        if widget is self:
            return None
        return widget

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self.browse_files()

    def browse_files(self):
        file_filter = f"{t('drop_zone.filter_name')} (*.pdf)"
        paths, _ = QFileDialog.getOpenFileNames(self, t("common.select_files"), "", file_filter)
        if paths:
            self.files_dropped.emit(paths)

    def _set_drag(self, active: bool):
        changed = active != self._was_dragging
        self._was_dragging = active
        self._refresh()
        if changed:
            self.drag_active_changed.emit(active)

    def _refresh(self):
        if self._drag.active:
            self._text_label.setText(t("drop_zone.drop_here"))
        elif self._file_count > 0:
            self._text_label.setText(t("drop_zone.files_loaded", count=self._file_count))
        else:
            self._text_label.setText(self._placeholder_text)
        self.update()

    def paintEvent(self, event):
        super().paintEvent(event)
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        if self._drag.active:
            pen = QPen(QColor("#007AFF"), 2, Qt.PenStyle.CustomDashLine)
            pen.setDashPattern([8, 4])
        elif self._file_count > 0:
            pen = QPen(QColor("#34C759"), 2, Qt.PenStyle.SolidLine)
        else:
            pen = QPen(QColor("#E5E5EA"), 2, Qt.PenStyle.CustomDashLine)
            pen.setDashPattern([8, 6])

        painter.setPen(pen)
        painter.drawRoundedRect(self.rect().adjusted(1, 1, -1, -1), 16, 16)
        painter.end()
