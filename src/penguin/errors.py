"""
Penguin Error Hierarchy
=======================

This module defines the root of the exception hierarchy for the Penguin
toolchain. All exceptions inherit from PenguinError, allowing callers to
catch every toolchain error with a single except clause if desired.

Exception Hierarchy
-------------------
PenguinError (base)
└── LexerError (lexical analysis, see penguin.lexer.errors)
    ├── InvalidCharacterError - character outside every lexical form
    ├── InvalidIdentifierError - reserved, not raised by current rules
    ├── InvalidEscapeSequenceError - unknown escape inside a string
    └── UnexpectedEOFError - input ended inside a string or comment

Design Philosophy
-----------------
Each exception captures source location information (source name, line,
column) when applicable. Error messages follow this format:

    source:line:column: error: description
        source_line_text
        ^
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass


# =============================================================================
# Base Exception Class
# =============================================================================

class PenguinError(Exception):
    """
    Base exception for all Penguin errors.

    All exceptions in the toolchain inherit from this class:

        try:
            tokens = lex_file("main.pg")
        except PenguinError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Snapshot
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    An immutable snapshot of a position in source text.

    The lexer tracks its position with a mutable Location; whenever a
    position has to outlive the scan (for example inside an error), a
    SourceLocation is taken instead.

    Attributes:
        source: Name of the source ("string" for in-memory input)
        line: Line number (1-indexed)
        column: Column number (0-indexed)
        index: Absolute character offset from the start of the source
    """
    source: str
    line: int
    column: int
    index: int = 0

    def __str__(self) -> str:
        """Format as 'source:line:column' with a 1-based column."""
        return f"{self.source}:{self.line}:{self.column + 1}"
