import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from core.candidates import CandidateFile


@pytest.fixture(scope="session")
def qapp():
    from PyQt6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def make_file(tmp_path):
    """Create a file on disk and return it as a CandidateFile."""
    def _make(name, data=b"%PDF-1.4\n%%EOF\n"):
        path = tmp_path / name
        path.write_bytes(data)
        return CandidateFile.from_path(str(path))
    return _make


class FakeResponse:
    def __init__(self, status_code=200, content=b""):
        self.status_code = status_code
        self.content = content

    def json(self):
        import json
        return json.loads(self.content.decode("utf-8"))


class FakeHttpSession:
    """Stands in for requests.Session; records what each POST would upload."""

    def __init__(self, response=None, exc=None):
        self.response = response or FakeResponse(200, b"%PDF-merged")
        self.exc = exc
        self.calls = []

    def post(self, url, files=None, timeout=None):
        uploaded = [
            (field, (name, handle.read(), content_type))
            for field, (name, handle, content_type) in (files or [])
        ]
        self.calls.append({"url": url, "files": uploaded, "timeout": timeout})
        if self.exc:
            raise self.exc
        return self.response


@pytest.fixture
def fake_http():
    return FakeHttpSession


@pytest.fixture
def fake_response():
    return FakeResponse
