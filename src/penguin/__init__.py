"""
Penguin - Lexical Analyzer for the Penguin Language
===================================================

This package converts Penguin source text into an ordered list of
classified tokens, keeping each token's literal text and tracking source
positions for diagnostics.

Penguin is a small imperative language:

    import "io";

    func main() : u32 = {
        let total := 1_000;
        total += 5;     // running sum
        return total;
    }

Main Components
---------------
- **lexer**: Position tracking, token model and the scanner
- **driver**: File/string entry points and scan timing
- **cli**: The ``pnglex`` command-line tool

Quick Start
-----------
Lex a string:
    >>> from penguin import lex_source
    >>> for token in lex_source("let x := 5;"):
    ...     print(token)
    Token(ASSIGN, 'let')
    Token(IDENTIFIER, 'x')
    Token(UNTYPED_ASSIGNMENT, ':=')
    Token(NUMBER, '5', 5)
    Token(SEMICOLON, ';')

Or use the command-line tool:
    $ pnglex main.pg
    $ pnglex --expr "let x := 5;" --time
"""

__version__ = "0.1.0"
__author__ = "Penguin Contributors"

# =============================================================================
# Public API Exports
# =============================================================================

from penguin.errors import PenguinError, SourceLocation
from penguin.lexer import (
    Lexer,
    Location,
    Token,
    TokenKind,
    identify,
    LexerError,
    InvalidCharacterError,
    InvalidIdentifierError,
    InvalidEscapeSequenceError,
    UnexpectedEOFError,
)
from penguin.driver import LexOptions, LexResult, lex_file, lex_source

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Lexer
    "Lexer",
    "Location",
    "Token",
    "TokenKind",
    "identify",
    # Driver
    "LexOptions",
    "LexResult",
    "lex_source",
    "lex_file",
    # Exception hierarchy
    "PenguinError",
    "SourceLocation",
    "LexerError",
    "InvalidCharacterError",
    "InvalidIdentifierError",
    "InvalidEscapeSequenceError",
    "UnexpectedEOFError",
]
