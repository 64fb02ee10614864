"""
Penguin Lexer Driver
====================

This module provides the entry points used by tools that need tokens:
load the source, run one scan, and hand back a fully built token list.

    Source (file or string) → Lexer → LexResult

Usage
-----
Command line:
    $ pnglex main.pg

Programmatic:
    >>> from penguin import lex_source
    >>> [t.literal for t in lex_source("x += 1;")]
    ['x', '+=', '1', ';']

Error Handling
--------------
Lexing is fail-fast. The first LexerError propagates unchanged to the
caller, who decides how to present it.
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from penguin.lexer import STRING_SOURCE, Lexer, Token

logger = logging.getLogger(__name__)


@dataclass
class LexOptions:
    """
    Driver configuration options.

    Attributes:
        source_name: Name reported in error locations for string input
        encoding: Text encoding used when reading source files
        timed: Measure how long the scan takes
    """
    source_name: str = STRING_SOURCE
    encoding: str = "utf-8"
    timed: bool = False


@dataclass
class LexResult:
    """
    Result of one scan.

    Attributes:
        source_name: Where the source came from
        tokens: The ordered token list
        elapsed: Scan time in seconds (None unless options.timed)
    """
    source_name: str
    tokens: list[Token] = field(default_factory=list)
    elapsed: Optional[float] = None

    @property
    def token_count(self) -> int:
        return len(self.tokens)


def run(source: str, options: Optional[LexOptions] = None) -> LexResult:
    """
    Lex source text according to options.

    Args:
        source: Penguin source code
        options: Driver configuration (uses defaults if None)

    Returns:
        LexResult holding the tokens and, if requested, the scan time

    Raises:
        LexerError: If the source contains a lexical error
    """
    options = options or LexOptions()
    lexer = Lexer(source, options.source_name)
    result = LexResult(source_name=options.source_name)

    if options.timed:
        start = time.perf_counter()
        result.tokens = lexer.lex()
        result.elapsed = time.perf_counter() - start
        logger.debug(f"Scan of {options.source_name} took {result.elapsed * 1000:.3f} ms")
    else:
        result.tokens = lexer.lex()

    return result


def run_file(filepath: str | Path, options: Optional[LexOptions] = None) -> LexResult:
    """
    Lex a source file.

    The file's path, as given, becomes the source name in error locations.

    Raises:
        FileNotFoundError: If the source file does not exist
        LexerError: If the source contains a lexical error
    """
    options = options or LexOptions()
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Source file not found: {filepath}")

    source = path.read_text(encoding=options.encoding)
    logger.debug(f"Read {len(source)} characters from {path}")

    file_options = LexOptions(
        source_name=str(filepath),
        encoding=options.encoding,
        timed=options.timed,
    )
    return run(source, file_options)


def lex_source(source: str, source_name: str = STRING_SOURCE) -> list[Token]:
    """
    Tokenize a source string.

    Args:
        source: Penguin source code
        source_name: Name used in error locations

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    return Lexer(source, source_name).lex()


def lex_file(filepath: str | Path, encoding: str = "utf-8") -> list[Token]:
    """
    Tokenize a source file.

    Raises:
        FileNotFoundError: If the source file does not exist
        LexerError: If lexing fails
    """
    return run_file(filepath, LexOptions(encoding=encoding)).tokens
