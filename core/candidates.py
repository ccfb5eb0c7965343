"""Candidate file list: PDF filtering and order-preserving list operations."""

import mimetypes
import os
from dataclasses import dataclass, field
from typing import Iterable, Tuple

PDF_CONTENT_TYPE = "application/pdf"


@dataclass(frozen=True)
class CandidateFile:
    path: str
    name: str
    content_type: str = ""
    size_bytes: int = 0

    @classmethod
    def from_path(cls, path: str) -> "CandidateFile":
        """Build a candidate from a local path.

        The content type is declared from the file extension, the same way a
        browser fills in ``File.type``; the file contents are never inspected.
        """
        content_type, _ = mimetypes.guess_type(path)
        size = os.path.getsize(path) if os.path.isfile(path) else 0
        return cls(
            path=path,
            name=os.path.basename(path),
            content_type=content_type or "",
            size_bytes=size,
        )


@dataclass
class IntakeResult:
    accepted: Tuple[CandidateFile, ...] = field(default_factory=tuple)
    rejected: Tuple[CandidateFile, ...] = field(default_factory=tuple)

    @property
    def has_rejections(self) -> bool:
        return len(self.rejected) > 0


def is_pdf(candidate: CandidateFile) -> bool:
    return candidate.content_type == PDF_CONTENT_TYPE


def split_by_type(files: Iterable[CandidateFile]) -> IntakeResult:
    """Partition files into PDFs and everything else, keeping relative order."""
    accepted = []
    rejected = []
    for candidate in files:
        if is_pdf(candidate):
            accepted.append(candidate)
        else:
            rejected.append(candidate)
    return IntakeResult(accepted=tuple(accepted), rejected=tuple(rejected))


def append_files(
    current: Tuple[CandidateFile, ...], new: Iterable[CandidateFile],
) -> Tuple[CandidateFile, ...]:
    return tuple(current) + tuple(new)


def remove_at(current: Tuple[CandidateFile, ...], index: int) -> Tuple[CandidateFile, ...]:
    """Drop exactly the element at index. Out-of-range indexes match nothing."""
    return tuple(f for i, f in enumerate(current) if i != index)


def move_file(
    current: Tuple[CandidateFile, ...], index: int, offset: int,
) -> Tuple[CandidateFile, ...]:
    """Swap the element at index with the one at index + offset."""
    target = index + offset
    if not (0 <= index < len(current)) or not (0 <= target < len(current)):
        return tuple(current)
    items = list(current)
    items[index], items[target] = items[target], items[index]
    return tuple(items)
