"""Single-pass per-file measurements."""

import re
from dataclasses import dataclass, field
from typing import Iterable

from ..scanning.classifier import ClassifiedLine, LineKind, StructuralTag
from .blocks import BlockExtentTracker

BRANCH_RE = re.compile(r"\b(?:if|unless|while|until|for|case)\b")
EXCEPTION_RE = re.compile(r"\b(?:rescue|ensure)\b")
LOGICAL_RE = re.compile(r"&&|\|\|")

BASE_COMPLEXITY = 1


def line_complexity(text: str) -> int:
    """Decision points on one line: branch keywords, rescue/ensure, && and ||."""
    return (
        len(BRANCH_RE.findall(text))
        + len(EXCEPTION_RE.findall(text))
        + len(LOGICAL_RE.findall(text))
    )


@dataclass
class FileMetrics:
    """Raw observations for a single scanned file.

    Complexity is a McCabe-style proxy: 1 plus every decision keyword or
    logical operator in the file's text, comments included.
    """

    path: str
    total_lines: int = 0
    code_lines: int = 0
    comment_lines: int = 0
    blank_lines: int = 0
    complexity: int = BASE_COMPLEXITY
    max_nesting_depth: int = 0
    method_declarations: int = 0
    class_declarations: int = 0
    module_declarations: int = 0
    method_lengths: list[int] = field(default_factory=list)
    class_sizes: list[int] = field(default_factory=list)


def measure_lines(path: str, lines: Iterable[ClassifiedLine]) -> FileMetrics:
    """Compute all per-file metrics in one pass over ``lines``."""
    metrics = FileMetrics(path=path)
    tracker = BlockExtentTracker()

    for number, line in enumerate(lines, start=1):
        metrics.total_lines += 1
        if line.kind is LineKind.BLANK:
            metrics.blank_lines += 1
        elif line.kind is LineKind.COMMENT:
            metrics.comment_lines += 1
        else:
            metrics.code_lines += 1

        metrics.complexity += line_complexity(line.raw)

        if line.tag is StructuralTag.METHOD_OPEN:
            metrics.method_declarations += 1
        elif line.tag is StructuralTag.CLASS_OPEN:
            metrics.class_declarations += 1
        elif line.keyword == "module":
            metrics.module_declarations += 1

        tracker.feed(line, number)

    tracker.finish()
    metrics.max_nesting_depth = tracker.max_depth
    metrics.method_lengths = [e.length for e in tracker.method_extents]
    metrics.class_sizes = [e.length for e in tracker.class_extents]
    return metrics
