"""Saving a received payload to disk as a downloaded file."""

import logging
import os
import tempfile
from contextlib import contextmanager
from typing import Iterator, Tuple

from core.utils import get_output_path

logger = logging.getLogger(__name__)

MERGED_FILENAME = "merged.pdf"


@contextmanager
def _staging_file(directory: str) -> Iterator[Tuple[object, str]]:
    """Open a temporary file in directory and remove it on exit if still present."""
    fd, tmp_path = tempfile.mkstemp(prefix=".download-", suffix=".part", dir=directory)
    try:
        with os.fdopen(fd, "wb") as handle:
            yield handle, tmp_path
    finally:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)


def save_download(payload: bytes, filename: str, directory: str) -> str:
    """Write payload into directory under filename without overwriting.

    The bytes go to a staging file first and are moved into place only once
    fully written. Returns the final path.
    """
    os.makedirs(directory, exist_ok=True)
    destination = get_output_path(os.path.join(directory, filename), suffix="")

    with _staging_file(directory) as (handle, tmp_path):
        handle.write(payload)
        handle.flush()
        handle.close()
        os.replace(tmp_path, destination)

    logger.info("Saved %s (%d bytes)", destination, len(payload))
    return destination
