"""
Penguin Lexer (Scanner)
=======================

This module implements the lexer for the Penguin language. It converts
source text into an ordered list of tokens in a single left-to-right
pass, or fails on the first lexical error.

Scanning Model
--------------
The scan state lives in a Cursor: the full source text plus a Location
tracker. Each character category has a small handler function that only
*peeks* at the cursor and returns a Scanned pair:

    Scanned(token, consumed)

where token is the emitted Token (None for whitespace and comments) and
consumed is the number of characters it covers. The lex() loop appends
the token and advances the cursor by that amount.

Compound Operators
------------------
Two-character operators that share a prefix with a one-character token
(:= += -= *= /= %=) are decided *before* anything is emitted. After a
colon or an arithmetic operator the handler looks past whitespace and
comments; if the next significant character is '=' the compound token is
emitted and the handler consumes everything up to and including the '='.
So ": =" and ":/* note */=" both yield a single ":=" token, and a '='
reached on its own is always a plain assignment.

Comments
--------
- Line: // comment (to end of line or input)
- Block: /* comment */ (not nested; unterminated is an error)

Escape Sequences
----------------
\\n \\t \\r \\0 \\" \\' \\\\, plus a backslash directly before a newline
(\\n or \\r\\n), which continues the string onto the next line without
inserting anything.

Example Usage
-------------
>>> from penguin.lexer import Lexer
>>> for token in Lexer("let x:u32=5;").lex():
...     print(token)
Token(ASSIGN, 'let')
Token(IDENTIFIER, 'x')
Token(TYPE_ASSIGNMENT, ':')
Token(IDENTIFIER, 'u32')
Token(LET_ASSIGNMENT, '=')
Token(NUMBER, '5', 5)
Token(SEMICOLON, ';')
"""

import logging
import string
from typing import Callable, NamedTuple, Optional

from penguin.errors import SourceLocation
from penguin.lexer.errors import (
    InvalidCharacterError,
    InvalidEscapeSequenceError,
    UnexpectedEOFError,
)
from penguin.lexer.location import STRING_SOURCE, Location
from penguin.lexer.tokens import (
    ARITHMETIC_OPERATORS,
    PUNCTUATION,
    SHORT_ASSIGNMENTS,
    Token,
    TokenKind,
    identify,
)

logger = logging.getLogger(__name__)


QUOTES = ("'", '"')

# Characters allowed after the leading digit of a number
NUMBER_CHARS = frozenset(string.digits + "_")

# Digits converted per int() call when building a number's value
NUMBER_CHUNK = 1000

# Escape character -> decoded character
ESCAPE_SEQUENCES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "0": "\0",
    '"': '"',
    "'": "'",
    "\\": "\\",
}


# =============================================================================
# Scan State
# =============================================================================

class Scanned(NamedTuple):
    """Result of one handler: the token (if any) and characters consumed."""
    token: Optional[Token]
    consumed: int


class Cursor:
    """
    The scanner's position within a fixed source text.

    Position bookkeeping is delegated to a Location; the cursor only adds
    bounds-checked access to the characters around it.
    """

    def __init__(self, source: str, source_name: str = STRING_SOURCE):
        self.source = source
        self.location = Location(source_name)

    @property
    def index(self) -> int:
        return self.location.index

    def at_end(self, offset: int = 0) -> bool:
        """Check whether position index + offset is past the source."""
        return self.location.index + offset >= len(self.source)

    def peek(self, offset: int = 0) -> str:
        """
        Look at the character at index + offset without moving.

        Returns an empty string past the end of the source.
        """
        pos = self.location.index + offset
        if pos >= len(self.source):
            return ""
        return self.source[pos]

    def text(self, length: int) -> str:
        """Return the next length characters starting at the cursor."""
        return self.source[self.location.index:self.location.index + length]

    def advance(self, count: int = 1) -> None:
        """Move forward count characters, stopping at the end of source."""
        for _ in range(count):
            if self.at_end():
                break
            self.location.advance(self.source[self.location.index])

    def retreat(self, count: int = 1) -> None:
        """
        Move back count characters.

        Raises:
            ValueError: If this would move before the start of source
        """
        for _ in range(count):
            if self.location.index == 0:
                raise ValueError("cannot retreat before the start of the source")
            self.location.retreat(self.source[self.location.index - 1])

    def location_at(self, offset: int = 0) -> SourceLocation:
        """Return the position offset characters ahead of the cursor."""
        offset = min(offset, len(self.source) - self.location.index)
        self.advance(offset)
        try:
            return self.location.snapshot()
        finally:
            self.retreat(offset)

    def line_text(self, offset: int = 0) -> str:
        """Return the full source line containing index + offset."""
        pos = min(self.location.index + offset, len(self.source))
        start = self.source.rfind("\n", 0, pos) + 1
        end = self.source.find("\n", pos)
        if end == -1:
            end = len(self.source)
        return self.source[start:end]


# =============================================================================
# Trivia Measurement
# =============================================================================

def _line_comment_length(cursor: Cursor, offset: int) -> int:
    """Length of a // comment at offset, not including the newline."""
    length = 2
    while cursor.peek(offset + length) not in ("", "\n"):
        length += 1
    return length


def _block_comment_length(cursor: Cursor, offset: int) -> int:
    """
    Length of a /* */ comment at offset, including both delimiters.

    Raises:
        UnexpectedEOFError: If the comment is never closed
    """
    length = 2
    while not cursor.at_end(offset + length):
        if cursor.peek(offset + length) == "*" and cursor.peek(offset + length + 1) == "/":
            return length + 2
        length += 1

    raise UnexpectedEOFError(
        "block comment",
        cursor.location_at(offset),
        cursor.line_text(offset),
    )


def _trivia_length(cursor: Cursor, offset: int) -> int:
    """Count the whitespace and comment characters starting at offset."""
    length = 0
    while True:
        char = cursor.peek(offset + length)
        following = cursor.peek(offset + length + 1)

        if char.isspace():
            length += 1
        elif char == "/" and following == "/":
            length += _line_comment_length(cursor, offset + length)
        elif char == "/" and following == "*":
            length += _block_comment_length(cursor, offset + length)
        else:
            return length


def _assignment_offset(cursor: Cursor) -> Optional[int]:
    """
    Find the '=' that completes a compound operator at the cursor.

    Returns:
        Offset of the '=' from the cursor, or None if the operator stands
        alone
    """
    gap = _trivia_length(cursor, 1)
    if cursor.peek(1 + gap) != "=":
        return None

    if gap:
        logger.debug(
            f"Joined '{cursor.peek()}=' across {gap} character(s) of trivia "
            f"at {cursor.location_at(0)}"
        )
    return 1 + gap


# =============================================================================
# Handlers
# =============================================================================

def scan_punctuation(cursor: Cursor) -> Scanned:
    char = cursor.peek()
    return Scanned(Token(PUNCTUATION[char], char), 1)


def scan_whitespace(cursor: Cursor) -> Scanned:
    length = 1
    while cursor.peek(length).isspace():
        length += 1
    return Scanned(None, length)


def scan_colon(cursor: Cursor) -> Scanned:
    """Scan ':' as a type annotation, or ':=' when an '=' follows."""
    equals = _assignment_offset(cursor)
    if equals is not None:
        return Scanned(Token(TokenKind.UNTYPED_ASSIGNMENT, ":="), equals + 1)
    return Scanned(Token(TokenKind.TYPE_ASSIGNMENT, ":"), 1)


def scan_equals(cursor: Cursor) -> Scanned:
    """
    Scan a plain '='.

    Every compound ending in '=' has already been claimed by the handler
    of its first character, so this is always an assignment, including
    at the very start of the input.
    """
    return Scanned(Token(TokenKind.LET_ASSIGNMENT, "="), 1)


def scan_operator(cursor: Cursor) -> Scanned:
    """
    Scan an arithmetic operator, its short assignment, or a comment.

    A '/' directly followed by '/' or '*' opens a comment, which yields
    no token.
    """
    char = cursor.peek()

    if char == "/":
        following = cursor.peek(1)
        if following == "/":
            return Scanned(None, _line_comment_length(cursor, 0))
        if following == "*":
            return Scanned(None, _block_comment_length(cursor, 0))

    equals = _assignment_offset(cursor)
    if equals is not None:
        return Scanned(Token(SHORT_ASSIGNMENTS[char], f"{char}="), equals + 1)
    return Scanned(Token(ARITHMETIC_OPERATORS[char], char), 1)


def scan_string(cursor: Cursor) -> Scanned:
    """
    Scan a string quoted with ' or ".

    Only the opening quote character closes the string, so the other
    quote can appear unescaped inside it. The token literal is the
    decoded content.

    Raises:
        InvalidEscapeSequenceError: For an unknown escape character
        UnexpectedEOFError: If the input ends before the closing quote
    """
    quote = cursor.peek()
    chars = []
    offset = 1

    while not cursor.at_end(offset):
        char = cursor.peek(offset)

        if char == quote:
            return Scanned(Token(TokenKind.STRING, "".join(chars)), offset + 1)

        if char != "\\":
            chars.append(char)
            offset += 1
            continue

        escaped = cursor.peek(offset + 1)
        if not escaped:
            break
        if escaped in ESCAPE_SEQUENCES:
            chars.append(ESCAPE_SEQUENCES[escaped])
        elif escaped == "\r" and cursor.peek(offset + 2) == "\n":
            offset += 3
            continue
        elif escaped != "\n":
            raise InvalidEscapeSequenceError(
                escaped,
                cursor.location_at(offset),
                cursor.line_text(offset),
            )
        offset += 2

    raise UnexpectedEOFError(
        "string literal",
        cursor.location_at(0),
        cursor.line_text(0),
    )


def scan_word(cursor: Cursor) -> Scanned:
    """Scan an identifier or keyword."""
    length = 1
    while True:
        char = cursor.peek(length)
        if not (char.isalnum() or char == "_"):
            break
        length += 1

    return Scanned(identify(cursor.text(length)), length)


def scan_number(cursor: Cursor) -> Scanned:
    """
    Scan an integer literal.

    Underscores are digit separators: they stay in the literal and are
    dropped from the value, so "1_000" has value 1000 and "1____" has 1.
    """
    length = 1
    while cursor.peek(length) in NUMBER_CHARS:
        length += 1

    literal = cursor.text(length)
    return Scanned(Token(TokenKind.NUMBER, literal, _number_value(literal)), length)


def _number_value(literal: str) -> int:
    """
    Convert a digit run to its integer value.

    Digits are folded in chunks so that arbitrarily long literals stay
    below the interpreter's limit on str -> int conversion.
    """
    digits = literal.replace("_", "")
    value = 0
    for start in range(0, len(digits), NUMBER_CHUNK):
        chunk = digits[start:start + NUMBER_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def scan_invalid(cursor: Cursor) -> Scanned:
    raise InvalidCharacterError(
        cursor.peek(),
        cursor.location_at(0),
        cursor.line_text(0),
    )


Handler = Callable[[Cursor], Scanned]


# =============================================================================
# Lexer
# =============================================================================

class Lexer:
    """
    Tokenizes Penguin source code.

    The source is fixed when the lexer is created. Each call to lex()
    rescans it from the start, so repeated calls return equal lists.
    A single instance must not be used from several threads at once.

    Usage:
        tokens = Lexer(source_text, "main.pg").lex()

    Attributes:
        source: The source code being tokenized
        source_name: File name, or "string" for in-memory text
    """

    def __init__(self, source: str, source_name: str = STRING_SOURCE):
        """
        Initialize the lexer with source code.

        Args:
            source: The Penguin source code to tokenize
            source_name: Name used in error locations
        """
        self.source = source
        self.source_name = source_name
        self._cursor = Cursor(source, source_name)

    @property
    def location(self) -> Location:
        """The live position of the scan."""
        return self._cursor.location

    def lex(self) -> list[Token]:
        """
        Scan the whole source.

        Returns:
            The ordered list of tokens

        Raises:
            LexerError: On the first lexical error; no partial result
        """
        self._cursor = Cursor(self.source, self.source_name)
        cursor = self._cursor
        tokens: list[Token] = []

        logger.debug(f"Lexing {self.source_name} ({len(self.source)} characters)")

        while not cursor.at_end():
            handler = self._handler_for(cursor.peek())
            token, consumed = handler(cursor)

            if token is not None:
                tokens.append(token)
            cursor.advance(consumed)

        logger.debug(f"Lexed {len(tokens)} tokens from {self.source_name}")
        return tokens

    @staticmethod
    def _handler_for(char: str) -> Handler:
        """Pick the handler for a token starting with char."""
        if char in PUNCTUATION:
            return scan_punctuation
        if char == ":":
            return scan_colon
        if char == "=":
            return scan_equals
        if char in ARITHMETIC_OPERATORS:
            return scan_operator
        if char in QUOTES:
            return scan_string
        if char in string.digits:
            return scan_number
        if char.isalpha() or char == "_":
            return scan_word
        if char.isspace():
            return scan_whitespace
        return scan_invalid
