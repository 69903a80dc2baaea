"""Distribution builder: grouped statistics over file metadata.

Nothing here reads file contents. Metadata comes from one ``os.stat`` per
path; a file that vanished since discovery has size 0 and ``exists`` False.
"""

import os
import re
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Sequence

from .models import (
    FileSizeStats,
    LargeFile,
    NamingPatterns,
    SizeCategories,
    SizeDistribution,
)

KIB = 1024
MIB = 1024 * KIB

NO_EXTENSION = "no_extension"

_SNAKE_CASE = re.compile(r"^[a-z][a-z0-9_]*$")
_CAMEL_CASE = re.compile(r"^[A-Z][a-zA-Z0-9]*$")
_UPPER = re.compile(r"[A-Z]")
_LOWER = re.compile(r"[a-z]")
_DIGIT = re.compile(r"\d")


@dataclass(frozen=True)
class SourceFile:
    """Stat facts about one input path."""

    path: str
    size: int
    extension: str
    directory: str
    basename: str
    exists: bool = True

    @classmethod
    def from_path(cls, path: str) -> "SourceFile":
        basename = os.path.basename(path)
        try:
            size = os.stat(path).st_size
            exists = True
        except OSError:
            size = 0
            exists = False
        return cls(
            path=path,
            size=size,
            extension=os.path.splitext(basename)[1].lower(),
            directory=os.path.dirname(path),
            basename=basename,
            exists=exists,
        )

    @property
    def stem(self) -> str:
        return os.path.splitext(self.basename)[0]


def stat_files(paths: Iterable[str]) -> list[SourceFile]:
    return [SourceFile.from_path(p) for p in paths]


def count_file_types(files: Iterable[SourceFile]) -> dict[str, int]:
    """Count files per lowercase extension, in first-seen order."""
    counts: Counter[str] = Counter()
    for f in files:
        counts[f.extension or NO_EXTENSION] += 1
    return dict(counts)


def size_bucket(size: int) -> str:
    """Name of the half-open size interval containing ``size``."""
    if size < KIB:
        return "tiny"
    if size < 10 * KIB:
        return "small"
    if size < 100 * KIB:
        return "medium"
    if size < MIB:
        return "large"
    return "huge"


def file_size_distribution(files: Iterable[SourceFile]) -> SizeDistribution:
    """Count existing files per size bucket."""
    distribution = SizeDistribution()
    for f in files:
        if not f.exists:
            continue
        bucket = size_bucket(f.size)
        setattr(distribution, bucket, getattr(distribution, bucket) + 1)
    return distribution


def file_count_by_size(files: Iterable[SourceFile]) -> SizeCategories:
    """Like :func:`file_size_distribution`, with everything from 100 KiB up as large."""
    categories = SizeCategories()
    for f in files:
        if not f.exists:
            continue
        bucket = size_bucket(f.size)
        if bucket == "huge":
            bucket = "large"
        setattr(categories, bucket, getattr(categories, bucket) + 1)
    return categories


def directory_distribution(files: Iterable[SourceFile]) -> dict[str, int]:
    """Files per parent directory, largest first; ties keep first-seen order."""
    counts: Counter[str] = Counter(f.directory for f in files)
    return dict(sorted(counts.items(), key=lambda item: -item[1]))


def naming_patterns(files: Iterable[SourceFile]) -> NamingPatterns:
    """Count naming conventions of basenames without extension.

    The counters are independent; one name can increment several.
    """
    patterns = NamingPatterns()
    for f in files:
        name = f.stem
        if _SNAKE_CASE.match(name):
            patterns.snake_case += 1
        if _CAMEL_CASE.match(name):
            patterns.camel_case += 1
        if _UPPER.search(name) and _LOWER.search(name):
            patterns.mixed_case += 1
        if _DIGIT.search(name):
            patterns.with_numbers += 1
        if "test" in name:
            patterns.test_files += 1
        if "spec" in name:
            patterns.spec_files += 1
    return patterns


def largest_files(files: Sequence[SourceFile], limit: int = 10) -> list[LargeFile]:
    """The ``limit`` biggest files; equal sizes keep input order."""
    ranked = sorted(files, key=lambda f: -f.size)
    return [
        LargeFile(path=f.path, size=f.size, size_kb=round(f.size / KIB, 2))
        for f in ranked[:limit]
    ]


def format_bytes(size: float) -> str:
    """Human readable size, e.g. ``1.5 KB``."""
    units = ["B", "KB", "MB", "GB", "TB"]
    value = float(size)
    unit_index = 0
    while value >= 1024 and unit_index < len(units) - 1:
        value /= 1024
        unit_index += 1
    return f"{round(value, 2)} {units[unit_index]}"


def average_file_size(files: Sequence[SourceFile]) -> FileSizeStats:
    """Mean size over all given files; vanished files count as 0 bytes."""
    if not files:
        return FileSizeStats()
    average = sum(f.size for f in files) / len(files)
    return FileSizeStats(
        bytes=round(average, 2),
        kb=round(average / KIB, 2),
        human_readable=format_bytes(average),
    )
