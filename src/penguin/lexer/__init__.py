"""
Penguin Lexer
=============

Converts Penguin source text into an ordered list of classified tokens.

Pipeline
--------
    Source text → Lexer (single pass) → list[Token]

Usage
-----
>>> from penguin.lexer import Lexer, TokenKind
>>> tokens = Lexer('import "io";').lex()
>>> [token.kind.name for token in tokens]
['IMPORT', 'STRING', 'SEMICOLON']
"""

from penguin.lexer.errors import (
    LexerError,
    InvalidCharacterError,
    InvalidIdentifierError,
    InvalidEscapeSequenceError,
    UnexpectedEOFError,
)
from penguin.lexer.lexer import Cursor, Lexer, Scanned
from penguin.lexer.location import STRING_SOURCE, Location
from penguin.lexer.tokens import KEYWORDS, Token, TokenKind, identify

__all__ = [
    # Scanner
    "Lexer",
    "Cursor",
    "Scanned",
    "Location",
    "STRING_SOURCE",
    # Token model
    "Token",
    "TokenKind",
    "KEYWORDS",
    "identify",
    # Errors
    "LexerError",
    "InvalidCharacterError",
    "InvalidIdentifierError",
    "InvalidEscapeSequenceError",
    "UnexpectedEOFError",
]
