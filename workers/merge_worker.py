"""Background worker for merge requests."""

from PyQt6.QtCore import QThread, pyqtSignal
from typing import Sequence

from core.candidates import CandidateFile
from core.merge_client import MergeClient, MergeError


class MergeWorker(QThread):
    """Sends the candidate files to the merge service in a background thread."""

    finished = pyqtSignal(bytes)
    error = pyqtSignal(str)

    def __init__(self, client: MergeClient, files: Sequence[CandidateFile], parent=None):
        super().__init__(parent)
        self._client = client
        self._files = tuple(files)

    def run(self):
        try:
            payload = self._client.merge(self._files)
            self.finished.emit(payload)
        except MergeError as e:
            self.error.emit(e.message)
        except Exception as e:
            self.error.emit(f"Unexpected error: {str(e)}")
