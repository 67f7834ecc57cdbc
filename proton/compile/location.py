import re
from bisect import bisect_right
from dataclasses import dataclass
from typing import Optional, Tuple

TERMINATOR = re.compile(r'\n\r?|\r\n?')


@dataclass(frozen=True)
class Location:
    line: int
    column: int


@dataclass(frozen=True)
class Position:
    source: Optional[str]
    start: Location
    end: Location
    range: Tuple[int, int]


class LineIndex:
    """Maps character offsets of a text to (line, column) locations.

    A line feed, a carriage return, CRLF and LF CR each end exactly one line.
    """

    def __init__(self, text):
        self.text = text
        self.starts = [0]
        self.starts.extend(m.end() for m in TERMINATOR.finditer(text))

    def location(self, offset):
        i = bisect_right(self.starts, offset) - 1
        return Location(i + 1, offset - self.starts[i])

    def span(self, source, start, end):
        return Position(source, self.location(start), self.location(end), (start, end))

    def line_text(self, line):
        if not 0 < line <= len(self.starts):
            return None
        m = TERMINATOR.search(self.text, self.starts[line - 1])
        return self.text[self.starts[line - 1]:m.start() if m else None]
