from __future__ import annotations

"""Segment model produced by the placeholder scanner.

A scanned template is a flat list of segments that fully partitions the
source text: joining ``Literal.text`` and ``Placeholder.marker`` in order
gives back the original template.
"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class SourcePosition:
    """Location of a marker inside a template.

    Attributes:
        offset: 0-based character offset.
        line:   1-based line number.
        col:    1-based column number in that line.
    """
    offset: int
    line: int
    col: int

    @classmethod
    def origin(cls) -> 'SourcePosition':
        return cls(offset=0, line=1, col=1)

    @classmethod
    def from_offset(cls, text: str, offset: int) -> 'SourcePosition':
        return cls.origin().advance(text, offset)

    def advance(self, text: str, offset: int) -> 'SourcePosition':
        """Return the position of *offset*, counting only text[self.offset:offset].

        *offset* must not lie before this position.
        """
        if offset < self.offset:
            raise ValueError(f"cannot move back from offset {self.offset} to {offset}")
        newlines = text.count('\n', self.offset, offset)
        if not newlines:
            return SourcePosition(offset=offset, line=self.line, col=self.col + offset - self.offset)
        line_start = text.rfind('\n', self.offset, offset) + 1
        return SourcePosition(offset=offset, line=self.line + newlines, col=offset - line_start + 1)

    def format(self) -> str:
        """Return a human-readable position label."""
        return f"line {self.line}, col {self.col}"


@dataclass(frozen=True)
class Literal:
    text: str
    start: int
    end: int


@dataclass(frozen=True)
class Placeholder:
    name: str
    argument: str
    start: int
    end: int
    marker: str
    position: Optional[SourcePosition] = None


Segment = Union[Literal, Placeholder]
