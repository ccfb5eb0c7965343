"""HTTP client for the remote PDF merge service."""

import logging
from contextlib import ExitStack
from typing import Optional, Sequence

import requests

from core.candidates import CandidateFile

logger = logging.getLogger(__name__)

MERGE_PATH = "/api/merge"
UPLOAD_FIELD = "files"
GENERIC_ERROR = "Failed to merge PDFs"


class MergeError(Exception):
    """A merge request that did not produce a merged PDF."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class MergeClient:
    """Sends candidate files to ``POST {base_url}/api/merge`` and returns the merged bytes."""

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        generic_error: str = GENERIC_ERROR,
    ):
        self._base_url = base_url.rstrip("/")
        self._generic_error = generic_error
        self._session = session or requests.Session()
        self._timeout = timeout

    @property
    def endpoint(self) -> str:
        return f"{self._base_url}{MERGE_PATH}"

    def merge(self, files: Sequence[CandidateFile]) -> bytes:
        """Upload files in order as repeated ``files`` parts.

        Raises MergeError for network failures, unreadable local files and
        any non-2xx response.
        """
        logger.info("Submitting %d file(s) to %s", len(files), self.endpoint)

        with ExitStack() as stack:
            try:
                parts = [
                    (
                        UPLOAD_FIELD,
                        (f.name, stack.enter_context(open(f.path, "rb")), f.content_type),
                    )
                    for f in files
                ]
            except OSError as e:
                logger.warning("Cannot read input file: %s", e)
                raise MergeError(str(e)) from e

            try:
                response = self._session.post(
                    self.endpoint, files=parts, timeout=self._timeout,
                )
            except requests.exceptions.RequestException as e:
                logger.warning("Merge request failed: %s", e)
                raise MergeError(str(e)) from e

        if not 200 <= response.status_code < 300:
            message = self._error_message(response)
            logger.warning("Merge service returned %s: %s", response.status_code, message)
            raise MergeError(message, status_code=response.status_code)

        payload = response.content
        logger.info("Received merged PDF (%d bytes)", len(payload))
        return payload

    def _error_message(self, response) -> str:
        """Pull the ``error`` field out of a JSON failure body."""
        try:
            data = response.json()
        except ValueError:
            return self._generic_error
        if isinstance(data, dict):
            error = data.get("error")
            if isinstance(error, str) and error:
                return error
        return self._generic_error
