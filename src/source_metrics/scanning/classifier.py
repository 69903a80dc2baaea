"""Line classifier: blank/comment/code kinds and structural keyword tags.

Classification is purely lexical. A structural keyword only counts when it
is the first token of the trimmed line, so modifier forms such as
``return if done`` stay untagged code.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional

COMMENT_MARKER = "#"

BLOCK_KEYWORDS = (
    "class",
    "module",
    "def",
    "if",
    "unless",
    "while",
    "until",
    "for",
    "case",
    "begin",
)

_BLOCK_OPEN_RE = re.compile(rf"^({'|'.join(BLOCK_KEYWORDS)})\b")
_CLASS_OPEN_RE = re.compile(r"^class\s+[A-Za-z_:]")
_METHOD_OPEN_RE = re.compile(r"^def\s+\S")
_BLOCK_CLOSE = "end"


class LineKind(Enum):
    BLANK = "blank"
    COMMENT = "comment"
    CODE = "code"


class StructuralTag(Enum):
    NONE = "none"
    BLOCK_OPEN = "block_open"
    BLOCK_CLOSE = "block_close"
    METHOD_OPEN = "method_open"
    CLASS_OPEN = "class_open"

    @property
    def opens_block(self) -> bool:
        return self in (StructuralTag.BLOCK_OPEN, StructuralTag.METHOD_OPEN, StructuralTag.CLASS_OPEN)


@dataclass(frozen=True)
class ClassifiedLine:
    """One source line with its kind and structural tag."""

    raw: str
    trimmed: str
    kind: LineKind
    tag: StructuralTag = StructuralTag.NONE
    keyword: Optional[str] = None


def classify_tag(trimmed: str) -> tuple[StructuralTag, Optional[str]]:
    """Return the structural tag and opening keyword of a trimmed code line."""
    if trimmed == _BLOCK_CLOSE:
        return StructuralTag.BLOCK_CLOSE, None

    match = _BLOCK_OPEN_RE.match(trimmed)
    if match is None:
        return StructuralTag.NONE, None

    keyword = match.group(1)
    if keyword == "class" and _CLASS_OPEN_RE.match(trimmed):
        return StructuralTag.CLASS_OPEN, keyword
    if keyword == "def" and _METHOD_OPEN_RE.match(trimmed):
        return StructuralTag.METHOD_OPEN, keyword
    return StructuralTag.BLOCK_OPEN, keyword


def classify_line(line: str) -> ClassifiedLine:
    """Classify a single line of text.

    Args:
        line: Raw line, with or without its trailing newline

    Returns:
        ClassifiedLine with kind and, for code lines, the structural tag
    """
    raw = line.rstrip("\r\n")
    trimmed = raw.strip()

    if not trimmed:
        return ClassifiedLine(raw=raw, trimmed=trimmed, kind=LineKind.BLANK)
    if trimmed.startswith(COMMENT_MARKER):
        return ClassifiedLine(raw=raw, trimmed=trimmed, kind=LineKind.COMMENT)

    tag, keyword = classify_tag(trimmed)
    return ClassifiedLine(raw=raw, trimmed=trimmed, kind=LineKind.CODE, tag=tag, keyword=keyword)


def classify_lines(lines: Iterable[str]) -> Iterator[ClassifiedLine]:
    """Lazily classify a sequence of lines, preserving order."""
    for line in lines:
        yield classify_line(line)
