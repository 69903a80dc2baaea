"""Block extent tracker: method and class line ranges without a grammar.

Every opener (``class``, ``module``, ``def``, ``if`` ...) raises the
nesting depth and every bare ``end`` lowers it. Only method and class
openers are remembered on a stack, together with the depth they opened at.
An ``end`` emits an extent only when it brings the depth back down from
the level of the construct on top of the stack; an ``end`` closing an
``if`` or ``while`` inside a method leaves the method open.

Known approximations: single-line methods (``def x; end``), endless
methods and truncated files leave constructs unclosed. Those are dropped
at end of file without an extent.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from ..scanning.classifier import ClassifiedLine, StructuralTag


class ExtentKind(Enum):
    METHOD = "method"
    CLASS = "class"


_TRACKED = {
    StructuralTag.METHOD_OPEN: ExtentKind.METHOD,
    StructuralTag.CLASS_OPEN: ExtentKind.CLASS,
}


@dataclass(frozen=True)
class BlockExtent:
    kind: ExtentKind
    start_line: int
    end_line: int

    @property
    def length(self) -> int:
        return self.end_line - self.start_line + 1


@dataclass(frozen=True)
class _OpenConstruct:
    kind: ExtentKind
    start_line: int
    depth: int


@dataclass
class BlockExtentTracker:
    """Depth-counting state machine fed one classified line at a time."""

    current_depth: int = 0
    max_depth: int = 0
    extents: list[BlockExtent] = field(default_factory=list)
    _stack: list[_OpenConstruct] = field(default_factory=list, repr=False)

    def feed(self, line: ClassifiedLine, line_number: int) -> None:
        """Advance the tracker with the 1-based ``line_number``."""
        tag = line.tag

        if tag.opens_block:
            self.current_depth += 1
            self.max_depth = max(self.max_depth, self.current_depth)
            kind = _TRACKED.get(tag)
            if kind is not None:
                self._stack.append(_OpenConstruct(kind, line_number, self.current_depth))

        elif tag is StructuralTag.BLOCK_CLOSE:
            if self._stack and self._stack[-1].depth == self.current_depth:
                opened = self._stack.pop()
                self.extents.append(BlockExtent(opened.kind, opened.start_line, line_number))
            self.current_depth = max(self.current_depth - 1, 0)

    def finish(self) -> None:
        """Close the file: drop unterminated constructs and reset depth."""
        self._stack.clear()
        self.current_depth = 0

    @property
    def open_constructs(self) -> int:
        return len(self._stack)

    @property
    def method_extents(self) -> list[BlockExtent]:
        return [e for e in self.extents if e.kind is ExtentKind.METHOD]

    @property
    def class_extents(self) -> list[BlockExtent]:
        return [e for e in self.extents if e.kind is ExtentKind.CLASS]


def track_extents(lines: Iterable[ClassifiedLine]) -> BlockExtentTracker:
    """Run a tracker over a whole file's classified lines."""
    tracker = BlockExtentTracker()
    for number, line in enumerate(lines, start=1):
        tracker.feed(line, number)
    tracker.finish()
    return tracker
