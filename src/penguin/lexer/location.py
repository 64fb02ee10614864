"""
Position Tracker
================

Tracks line, column and absolute offset while the lexer walks a single
named source unit one character at a time.

Lines are 1-indexed and columns 0-indexed. When a newline is consumed the
length of the completed line is remembered, so that stepping back over the
newline restores the column the cursor had before it.

Example
-------
>>> loc = Location("main.pg")
>>> for char in "ab\\nc":
...     loc.advance(char)
>>> (loc.line, loc.column, loc.index)
(2, 1, 4)
>>> loc.retreat("c"); loc.retreat("\\n")
>>> (loc.line, loc.column, loc.index)
(1, 2, 2)
"""

from penguin.errors import SourceLocation


# Source name used for text that did not come from a file
STRING_SOURCE = "string"


class Location:
    """
    Mutable cursor position within one source unit.

    Attributes:
        source: Name of the source file, or "string" for in-memory text
        line: Current line (1-indexed)
        column: Current column (0-indexed, reset on newline)
        index: Absolute character offset
    """

    def __init__(self, source: str = STRING_SOURCE):
        self.source = source
        self.line = 1
        self.column = 0
        self.index = 0

        # Lengths of every completed line, most recent last
        self._line_lengths: list[int] = []

    def advance(self, current_char: str) -> None:
        """
        Move one character forward past current_char.

        Args:
            current_char: The character being consumed
        """
        self.index += 1

        if current_char == "\n":
            self._line_lengths.append(self.column)
            self.line += 1
            self.column = 0
        else:
            self.column += 1

    def retreat(self, current_char: str) -> None:
        """
        Move one character back over current_char.

        This is the exact inverse of advance() for the same character.

        Args:
            current_char: The character being stepped back over

        Raises:
            ValueError: If already at the start of the source
        """
        if self.index == 0:
            raise ValueError("cannot retreat before the start of the source")

        self.index -= 1

        if current_char == "\n":
            self.line -= 1
            self.column = self._line_lengths.pop()
        else:
            self.column -= 1

    def snapshot(self) -> SourceLocation:
        """Return an immutable copy of the current position."""
        return SourceLocation(self.source, self.line, self.column, self.index)

    def __repr__(self) -> str:
        return f"Location({self.source!r}, {self.line}:{self.column}, index={self.index})"
