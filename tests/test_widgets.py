from PyQt6.QtCore import QMimeData, QPoint, QPointF, Qt, QUrl
from PyQt6.QtGui import QDragEnterEvent, QDragLeaveEvent, QDragMoveEvent, QDropEvent
from PyQt6.QtWidgets import QLabel, QWidget
from PyQt6.QtTest import QTest

from core.candidates import CandidateFile
from core.merge_client import MergeClient
from ui.components.drop_zone import DropZone
from ui.components.error_banner import ErrorBanner
from ui.components.file_list_widget import FileListWidget
from ui.merge_widget import MergeWidget


def _pdf(name):
    return CandidateFile(path=f"/tmp/{name}", name=name, content_type="application/pdf")


def test_drop_zone_owns_its_children_only(qapp):
    window = QWidget()
    zone = DropZone(parent=window)
    sibling = QWidget(window)

    assert zone.owns(zone)
    assert zone.owns(zone._text_label)
    assert zone.owns(zone._hint_label)
    assert not zone.owns(sibling)
    assert not zone.owns(window)
    assert not zone.owns(None)


def test_drop_zone_starts_idle(qapp):
    zone = DropZone()
    assert not zone.is_dragging()
    zone.set_file_count(2)
    assert zone._text_label.text() == "2 file(s) selected. Drop more or click to add."


def _file_urls(*paths):
    mime = QMimeData()
    mime.setUrls([QUrl.fromLocalFile(p) for p in paths])
    return mime


def _drag_enter(mime):
    return QDragEnterEvent(
        QPoint(10, 10), Qt.DropAction.CopyAction, mime,
        Qt.MouseButton.LeftButton, Qt.KeyboardModifier.NoModifier,
    )


def _drag_move(mime):
    return QDragMoveEvent(
        QPoint(12, 12), Qt.DropAction.CopyAction, mime,
        Qt.MouseButton.LeftButton, Qt.KeyboardModifier.NoModifier,
    )


def _drop(mime):
    return QDropEvent(
        QPointF(12, 12), Qt.DropAction.CopyAction, mime,
        Qt.MouseButton.LeftButton, Qt.KeyboardModifier.NoModifier,
    )


def _dragging_zone(mime, parent=None):
    zone = DropZone(parent=parent)
    changes = []
    zone.drag_active_changed.connect(changes.append)
    zone.dragEnterEvent(_drag_enter(mime))
    zone.dragMoveEvent(_drag_move(mime))
    assert zone.is_dragging()
    assert zone._text_label.text() == "Drop files here"
    return zone, changes


def test_drop_zone_ignores_drag_without_urls(qapp):
    zone = DropZone()
    mime = QMimeData()
    mime.setText("not a file")
    event = _drag_enter(mime)

    zone.dragEnterEvent(event)

    assert not event.isAccepted()
    assert not zone.is_dragging()


def test_drop_zone_drop_emits_local_paths_and_goes_idle(qapp):
    mime = _file_urls("/tmp/a.pdf", "/tmp/b.pdf")
    zone, changes = _dragging_zone(mime)
    dropped = []
    zone.files_dropped.connect(dropped.append)
    event = _drop(mime)

    zone.dropEvent(event)

    assert event.isAccepted()
    assert dropped == [["/tmp/a.pdf", "/tmp/b.pdf"]]
    assert not zone.is_dragging()
    assert changes == [True, False]
    assert zone._text_label.text() == zone._placeholder_text


def test_drop_zone_ignores_drop_without_local_files(qapp):
    mime = QMimeData()
    mime.setUrls([QUrl("https://example.com/remote.pdf")])
    zone, _ = _dragging_zone(mime)
    dropped = []
    zone.files_dropped.connect(dropped.append)
    event = _drop(mime)

    zone.dropEvent(event)

    assert not event.isAccepted()
    assert dropped == []
    assert not zone.is_dragging()


def test_drop_zone_cancelled_drag_over_own_label_goes_idle(qapp, monkeypatch):
    # Escape ends the drag with the pointer still over the zone's label.
    mime = _file_urls("/tmp/a.pdf")
    zone, changes = _dragging_zone(mime)
    monkeypatch.setattr(zone, "_widget_under_cursor", lambda: zone._text_label)

    zone.dragLeaveEvent(QDragLeaveEvent())

    assert not zone.is_dragging()
    assert changes == [True, False]
    assert zone._text_label.text() == zone._placeholder_text


def test_drop_zone_cancelled_drag_over_itself_goes_idle(qapp, monkeypatch):
    mime = _file_urls("/tmp/a.pdf")
    zone, _ = _dragging_zone(mime)
    monkeypatch.setattr(zone, "_widget_under_cursor", lambda: zone)

    zone.dragLeaveEvent(QDragLeaveEvent())

    assert not zone.is_dragging()


def test_drop_zone_leave_into_accepting_child_keeps_drag(qapp, monkeypatch):
    mime = _file_urls("/tmp/a.pdf")
    zone, changes = _dragging_zone(mime)
    inner = QLabel("inner", zone)
    inner.setAcceptDrops(True)
    monkeypatch.setattr(zone, "_widget_under_cursor", lambda: inner)

    zone.dragLeaveEvent(QDragLeaveEvent())

    assert zone.is_dragging()
    assert changes == [True]


def test_drop_zone_leave_to_outside_widget_clears_drag(qapp, monkeypatch):
    window = QWidget()
    window.setAcceptDrops(True)
    mime = _file_urls("/tmp/a.pdf")
    zone, changes = _dragging_zone(mime, parent=window)
    sibling = QLabel("elsewhere", window)
    monkeypatch.setattr(zone, "_widget_under_cursor", lambda: sibling)

    zone.dragLeaveEvent(QDragLeaveEvent())

    assert not zone.is_dragging()
    assert changes == [True, False]


def test_drop_zone_leave_out_of_window_clears_drag(qapp, monkeypatch):
    mime = _file_urls("/tmp/a.pdf")
    zone, _ = _dragging_zone(mime)
    monkeypatch.setattr(zone, "_widget_under_cursor", lambda: None)

    zone.dragLeaveEvent(QDragLeaveEvent())

    assert not zone.is_dragging()


def test_error_banner_replaces_message_and_restarts(qapp):
    banner = ErrorBanner(timeout_ms=10_000)

    banner.show_error("first")
    banner.show_error("second")

    assert banner.message() == "second"
    assert banner.is_counting_down()


def test_error_banner_clears_itself(qapp):
    banner = ErrorBanner(timeout_ms=20)
    dismissed = []
    banner.dismissed.connect(lambda: dismissed.append(True))

    banner.show_error("Only PDF files are accepted")
    QTest.qWait(200)

    assert banner.message() == ""
    assert not banner.is_counting_down()
    assert dismissed == [True]


def test_file_list_renders_rows_and_forwards_actions(qapp):
    widget = FileListWidget()
    removed = []
    cleared = []
    widget.remove_requested.connect(removed.append)
    widget.clear_requested.connect(lambda: cleared.append(True))

    widget.set_files([_pdf("a.pdf"), _pdf("b.pdf"), _pdf("c.pdf")])
    assert widget.count() == 3
    assert widget.row_count() == 3
    assert widget._count_label.text() == "Selected Files (3)"

    widget._rows[1].remove_clicked.emit(1)
    widget._clear_btn.click()
    assert removed == [1]
    assert cleared == [True]

    widget.set_files([])
    assert widget.row_count() == 0


def test_merge_widget_intake_shows_banner(qapp, tmp_path):
    pdf = tmp_path / "one.pdf"
    pdf.write_bytes(b"%PDF")
    image = tmp_path / "photo.jpg"
    image.write_bytes(b"\xff\xd8")

    widget = MergeWidget(MergeClient("http://merge.local"))
    assert not widget._merge_btn.isEnabled()

    widget.add_paths([str(pdf), str(image)])

    assert [f.name for f in widget.session.files] == ["one.pdf"]
    assert widget._file_list.row_count() == 1
    assert widget._error_banner.message() == "Only PDF files are accepted"
    assert widget._merge_btn.isEnabled()

    widget.clear_all()
    assert widget._file_list.row_count() == 0
    assert not widget._merge_btn.isEnabled()


def test_merge_widget_empty_merge_starts_no_worker(qapp):
    widget = MergeWidget(MergeClient("http://merge.local"))

    widget.start_merge()

    assert widget._worker is None
    assert widget._error_banner.message() == "Please add PDF files to merge"
