"""
scanner – Single-pass placeholder scanner.

Splits a template into an ordered list of segments:

  • Literal      → text copied verbatim
  • Placeholder  → `<!$ name argument>`; `argument` is everything between
                   the whitespace following the name and the closing `>`,
                   taken verbatim (it may contain spaces and newlines)

A start token always opens a marker. The scan fails with
MalformedMarkerError when that marker is not closed, has no whitespace after
the start token, has an empty name, or contains another start token before
its `>`. There is no escape syntax: the first `>` closes the marker.
"""

from __future__ import annotations

from typing import Iterator, List

from funcytpl.constants import CLOSE_TOKEN, START_TOKEN
from funcytpl.core.errors import MalformedMarkerError
from funcytpl.core.models import Literal, Placeholder, Segment, SourcePosition


class PlaceholderScanner:
    """Scanner for `<!$ name argument>` markers.

    Line and column numbers are tracked incrementally, so a full scan stays
    linear in the length of the template.
    """

    def scan(self, text: str) -> List[Segment]:
        """Return every segment of *text*, or raise on the first malformed marker."""
        return list(self.iter_segments(text))

    def iter_segments(self, text: str) -> Iterator[Segment]:
        """Yield the segments of *text* lazily, left to right.

        Parameters
        ----------
        text:
            Template text. An empty string yields nothing.

        Raises
        ------
        MalformedMarkerError
            When a start token does not introduce a well-formed marker.
        """
        i = 0
        n = len(text)
        pos = SourcePosition.origin()

        while i < n:
            start = text.find(START_TOKEN, i)
            if start == -1:
                yield Literal(text=text[i:], start=i, end=n)
                return
            if start > i:
                yield Literal(text=text[i:start], start=i, end=start)

            pos = pos.advance(text, start)
            placeholder = self._read_marker(text, pos)
            yield placeholder
            i = placeholder.end

    @staticmethod
    def _read_marker(text: str, pos: SourcePosition) -> Placeholder:
        start = pos.offset
        body = start + len(START_TOKEN)

        close = text.find(CLOSE_TOKEN, body)
        if close == -1:
            raise MalformedMarkerError("Unterminated placeholder marker", position=pos)
        nested = text.find(START_TOKEN, body, close)
        if nested != -1:
            raise MalformedMarkerError(
                "Nested placeholder marker",
                position=pos.advance(text, nested),
            )

        j = body
        if j == close:
            raise MalformedMarkerError("Empty placeholder name", position=pos)
        if not text[j].isspace():
            raise MalformedMarkerError("Expected whitespace after marker start", position=pos)
        while j < close and text[j].isspace():
            j += 1

        name_start = j
        while j < close and not text[j].isspace():
            j += 1
        name = text[name_start:j]
        if not name:
            raise MalformedMarkerError("Empty placeholder name", position=pos)

        while j < close and text[j].isspace():
            j += 1
        end = close + len(CLOSE_TOKEN)
        return Placeholder(
            name=name,
            argument=text[j:close],
            start=start,
            end=end,
            marker=text[start:end],
            position=pos,
        )


_DEFAULT_SCANNER = PlaceholderScanner()


def scan_segments(text: str) -> List[Segment]:
    """Scan *text* with the default scanner."""
    return _DEFAULT_SCANNER.scan(text)
