"""Page state for one merge session: candidate list, in-flight flag, error message."""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Tuple

from core.candidates import (
    CandidateFile, IntakeResult, append_files, move_file, remove_at, split_by_type,
)
from core.download import MERGED_FILENAME
from core.merge_client import MergeError

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[], None]
ErrorCallback = Callable[[Optional[str]], None]
SaveCallback = Callable[[bytes, str], str]


@dataclass(frozen=True)
class SessionMessages:
    """User-facing texts for the errors the session raises itself."""

    only_pdf: str = "Only PDF files are accepted"
    no_files: str = "Please add PDF files to merge"


class MergeSession:
    """
    Holds everything the merge page shows, independent of any widget.

    The candidate tuple is replaced on every change, never mutated. A merge
    runs as begin_merge() -> (network) -> complete_merge() or fail_merge(),
    so the network step can happen on another thread.
    """

    def __init__(
        self,
        on_changed: Optional[ChangeCallback] = None,
        on_error: Optional[ErrorCallback] = None,
        messages: Optional[SessionMessages] = None,
    ):
        self._messages = messages or SessionMessages()
        self._files: Tuple[CandidateFile, ...] = ()
        self._in_flight = False
        self._error: Optional[str] = None
        self._on_changed = on_changed
        self._on_error = on_error

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def files(self) -> Tuple[CandidateFile, ...]:
        return self._files

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def can_merge(self) -> bool:
        return bool(self._files) and not self._in_flight

    # ------------------------------------------------------------------
    # List management
    # ------------------------------------------------------------------

    def add_files(self, files: Iterable[CandidateFile]) -> IntakeResult:
        """Append the PDF subset of files; flag an error if anything was dropped."""
        result = split_by_type(files)
        if result.has_rejections:
            logger.debug("Rejected non-PDF files: %s", [f.name for f in result.rejected])
            self._set_error(self._messages.only_pdf)
        if result.accepted:
            self._replace(append_files(self._files, result.accepted))
        return result

    def add_paths(self, paths: Iterable[str]) -> IntakeResult:
        return self.add_files(CandidateFile.from_path(p) for p in paths)

    def remove_file(self, index: int):
        self._replace(remove_at(self._files, index))

    def move_up(self, index: int):
        self._replace(move_file(self._files, index, -1))

    def move_down(self, index: int):
        self._replace(move_file(self._files, index, 1))

    def clear_all(self):
        self._replace(())

    # ------------------------------------------------------------------
    # Merge
    # ------------------------------------------------------------------

    def begin_merge(self) -> Optional[Tuple[CandidateFile, ...]]:
        """Enter the in-flight state and return the files to send.

        Returns None when a merge is already running or nothing is selected.
        """
        if self._in_flight:
            return None
        if not self._files:
            self._set_error(self._messages.no_files)
            return None

        self._in_flight = True
        self._set_error(None)
        self._notify_changed()
        return self._files

    def complete_merge(self, payload: bytes, save: SaveCallback) -> Optional[str]:
        """Hand the merged bytes to save() and empty the list. Returns the saved path."""
        try:
            saved_path = save(payload, MERGED_FILENAME)
        except OSError as e:
            logger.warning("Could not save merged PDF: %s", e)
            self.fail_merge(str(e))
            return None

        self._in_flight = False
        self._files = ()
        self._notify_changed()
        return saved_path

    def fail_merge(self, message: str):
        self._in_flight = False
        self._set_error(message)
        self._notify_changed()

    def merge(self, client, save: SaveCallback) -> Optional[str]:
        """Run a whole merge synchronously with the given client."""
        files = self.begin_merge()
        if files is None:
            return None
        try:
            payload = client.merge(files)
        except MergeError as e:
            self.fail_merge(e.message)
            return None
        return self.complete_merge(payload, save)

    def dismiss_error(self):
        """Forget the current message once the banner has hidden it."""
        self._error = None

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _replace(self, files: Tuple[CandidateFile, ...]):
        self._files = files
        self._notify_changed()

    def _set_error(self, message: Optional[str]):
        self._error = message
        if self._on_error:
            self._on_error(message)

    def _notify_changed(self):
        if self._on_changed:
            self._on_changed()
