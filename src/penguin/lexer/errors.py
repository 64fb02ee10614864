"""
Penguin Lexer Error Hierarchy
=============================

This module defines the exceptions raised by the Penguin lexer. All of
them inherit from LexerError, which itself inherits from PenguinError for
consistent handling across the toolchain.

Exception Hierarchy
-------------------
LexerError (base for all lexical errors)
├── InvalidCharacterError - character not part of any lexical form
├── InvalidIdentifierError - reserved; no current rule raises it
├── InvalidEscapeSequenceError - unknown character after '\\' in a string
└── UnexpectedEOFError - input ended inside a string or block comment

The lexer is fail-fast: the first error aborts the scan and no partial
token list is returned.

Error Message Format
--------------------
    main.pg:3:9: error: invalid escape sequence '\\q'
        let s := "a\\qb";
                ^
    hint: valid escapes are \\n \\t \\r \\0 \\" \\' \\\\
"""

from typing import Optional

from penguin.errors import PenguinError, SourceLocation


# =============================================================================
# Base Lexer Exception
# =============================================================================

class LexerError(PenguinError):
    """
    Base exception for all lexer errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred
        hint: A suggestion for fixing the error
        source_line: The source text of the line containing the error
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example:
            main.pg:1:10: error: invalid character '$' (0x24)
                let x := $;
                         ^
        """
        parts = []

        # Location prefix: source:line:column: error: message
        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer (columns are 0-indexed).
        # Tabs are expanded in both so the caret lines up with the text.
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line.expandtabs()}")
            prefix = self.source_line[:self.location.column].expandtabs()
            padding = " " * (4 + len(prefix))
            parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Specific Lexer Errors
# =============================================================================

class InvalidCharacterError(LexerError):
    """
    A character that does not start any lexical form.

    Example:
        let price := $5;
    """

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"invalid character '{char}' (0x{ord(char):02X})",
            location=location,
            source_line=source_line,
        )


class InvalidIdentifierError(LexerError):
    """
    An identifier that is not well formed.

    Kept as part of the error taxonomy; the current identifier rules
    accept every run they scan, so nothing raises it yet.
    """

    def __init__(
        self,
        text: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.text = text
        super().__init__(
            f"invalid identifier '{text}'",
            location=location,
            source_line=source_line,
        )


class InvalidEscapeSequenceError(LexerError):
    """
    An unrecognised escape sequence inside a string literal.

    Example:
        let s := "tab\\q";
    """

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        if char.isprintable():
            message = f"invalid escape sequence '\\{char}'"
        else:
            message = f"invalid escape sequence: '\\' followed by 0x{ord(char):02X}"
        super().__init__(
            message,
            location=location,
            hint="valid escapes are \\n \\t \\r \\0 \\\" \\' \\\\ and a backslash before a newline",
            source_line=source_line,
        )


class UnexpectedEOFError(LexerError):
    """
    The input ended before a construct was closed.

    Raised for strings without a closing quote (including a string that
    ends in a lone backslash) and for block comments without '*/'.

    Attributes:
        context: What was still open, e.g. "string literal"
    """

    HINTS = {
        "string literal": "add the matching closing quote to complete the string",
        "block comment": "add closing */ to terminate the comment",
    }

    def __init__(
        self,
        context: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.context = context
        super().__init__(
            f"unexpected end of input in {context}",
            location=location,
            hint=self.HINTS.get(context),
            source_line=source_line,
        )
