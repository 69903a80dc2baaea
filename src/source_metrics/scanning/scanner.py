"""File scanner: reads a source file once and yields classified lines.

Per-file problems never abort a batch. A file that is missing, not a
regular file, or unreadable produces a :class:`ScannedFile` with no lines
and a ``skip_reason``; the scanner also records it in ``skipped``.
"""

import os
from dataclasses import dataclass, field
from typing import Iterator, Optional

from ..exceptions import FileAccessError
from ..logging_config import get_logger
from .classifier import ClassifiedLine, classify_lines

logger = get_logger(__name__)


@dataclass(frozen=True)
class SkippedFile:
    """A file that could not be scanned, with the reason."""

    path: str
    reason: str


@dataclass
class ScannedFile:
    """Outcome of scanning one file.

    ``lines`` is a lazy generator; it can be consumed once. Scan the path
    again to get a fresh one.
    """

    path: str
    lines: Iterator[ClassifiedLine] = field(default_factory=lambda: iter(()))
    skip_reason: Optional[str] = None

    @property
    def skipped(self) -> bool:
        return self.skip_reason is not None


def read_source_lines(path: str, encoding: str = "utf-8") -> list[str]:
    """Read all lines of ``path`` in order.

    Raises:
        FileAccessError: If the path is missing, not a regular file, or unreadable
    """
    if not os.path.exists(path):
        raise FileAccessError(path, "file does not exist")
    if not os.path.isfile(path):
        raise FileAccessError(path, "not a regular file")

    try:
        with open(path, encoding=encoding, errors="replace") as f:
            return f.readlines()
    except (OSError, LookupError) as e:
        raise FileAccessError(path, f"Cannot read file: {e}")


class FileScanner:
    """Scans files into classified-line streams, collecting skip diagnostics."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding
        self.skipped: list[SkippedFile] = []

    def scan(self, path: str) -> ScannedFile:
        try:
            raw_lines = read_source_lines(path, self.encoding)
        except FileAccessError as e:
            logger.warning(f"Skipping {path}: {e.reason}")
            self.skipped.append(SkippedFile(path=path, reason=e.reason))
            return ScannedFile(path=path, skip_reason=e.reason)

        logger.debug(f"Scanning {path} ({len(raw_lines)} lines)")
        return ScannedFile(path=path, lines=classify_lines(raw_lines))
