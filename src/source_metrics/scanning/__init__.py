"""Line classification and file scanning."""

from .classifier import (
    BLOCK_KEYWORDS,
    ClassifiedLine,
    LineKind,
    StructuralTag,
    classify_line,
    classify_lines,
)
from .scanner import FileScanner, ScannedFile, SkippedFile, read_source_lines

__all__ = [
    "BLOCK_KEYWORDS",
    "ClassifiedLine",
    "LineKind",
    "StructuralTag",
    "classify_line",
    "classify_lines",
    "FileScanner",
    "ScannedFile",
    "SkippedFile",
    "read_source_lines",
]
