"""
Penguin Token Model
===================

Defines the closed set of token kinds produced by the Penguin lexer, the
immutable Token record, and the keyword classifier.

Token Categories
----------------
- Structural punctuation: : = ; ( ) { } [ ] ,
- Compound assignment: := += -= *= /= %=
- Arithmetic operators: + - * / %
- Literals: identifiers, strings, integer numbers
- Keywords: let, func, return, import (matched case-insensitively)

Example
-------
>>> identify("LET")
Token(ASSIGN, 'LET')
>>> Token(TokenKind.NUMBER, "1_000", 1000)
Token(NUMBER, '1_000', 1000)
"""

from dataclasses import dataclass
from enum import Enum, auto


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """
    Token kinds for the Penguin language.

    Keywords are distinguished from identifiers so that consumers never
    have to re-inspect literal text.
    """

    # === Structural Punctuation ===
    TYPE_ASSIGNMENT = auto()    # :
    LET_ASSIGNMENT = auto()     # =
    SEMICOLON = auto()          # ;
    OPEN_PAREN = auto()         # (
    CLOSE_PAREN = auto()        # )
    OPEN_BRACE = auto()         # {
    CLOSE_BRACE = auto()        # }
    OPEN_BRACKET = auto()       # [
    CLOSE_BRACKET = auto()      # ]
    COMMA = auto()              # ,

    # === Compound Assignment ===
    UNTYPED_ASSIGNMENT = auto() # :=
    TYPED_ASSIGNMENT = auto()   # : u32 =  (reserved, value is the type name)
    SHORT_INCREMENT = auto()    # +=
    SHORT_DECREMENT = auto()    # -=
    SHORT_MULTIPLY = auto()     # *=
    SHORT_DIVIDE = auto()       # /=
    SHORT_MODULO = auto()       # %=

    # === Arithmetic Operators ===
    PLUS = auto()               # +
    MINUS = auto()              # -
    MULTIPLY = auto()           # *
    DIVIDE = auto()             # /
    MODULO = auto()             # %

    # === Literals ===
    IDENTIFIER = auto()         # Variable, function and type names
    STRING = auto()             # '...' or "..."
    NUMBER = auto()             # Integer literals, value is the magnitude

    # === Keywords ===
    ASSIGN = auto()             # let
    FUNCTION = auto()           # func
    RETURN = auto()             # return
    IMPORT = auto()             # import


# =============================================================================
# Lookup Tables
# =============================================================================

# Single characters that always form a token on their own
PUNCTUATION: dict[str, TokenKind] = {
    ";": TokenKind.SEMICOLON,
    "(": TokenKind.OPEN_PAREN,
    ")": TokenKind.CLOSE_PAREN,
    "{": TokenKind.OPEN_BRACE,
    "}": TokenKind.CLOSE_BRACE,
    "[": TokenKind.OPEN_BRACKET,
    "]": TokenKind.CLOSE_BRACKET,
    ",": TokenKind.COMMA,
}

ARITHMETIC_OPERATORS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.MULTIPLY,
    "/": TokenKind.DIVIDE,
    "%": TokenKind.MODULO,
}

# Operator character -> compound formed when followed by '='
SHORT_ASSIGNMENTS: dict[str, TokenKind] = {
    "+": TokenKind.SHORT_INCREMENT,
    "-": TokenKind.SHORT_DECREMENT,
    "*": TokenKind.SHORT_MULTIPLY,
    "/": TokenKind.SHORT_DIVIDE,
    "%": TokenKind.SHORT_MODULO,
}

# Keys are lower-case; lookups fold the candidate first
KEYWORDS: dict[str, TokenKind] = {
    "let": TokenKind.ASSIGN,
    "func": TokenKind.FUNCTION,
    "return": TokenKind.RETURN,
    "import": TokenKind.IMPORT,
}


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single lexical unit of Penguin source.

    Attributes:
        kind: The TokenKind classification
        literal: Source text behind the token. Case is preserved; strings
            hold their decoded content and numbers keep their underscores.
        value: Semantic value. The integer magnitude for NUMBER, the type
            name for TYPED_ASSIGNMENT, otherwise None.
    """
    kind: TokenKind
    literal: str
    value: str | int | None = None

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.value is None:
            return f"Token({self.kind.name}, {self.literal!r})"
        if self.kind == TokenKind.NUMBER:
            return f"Token({self.kind.name}, {self.literal!r}, {self.value_text()})"
        return f"Token({self.kind.name}, {self.literal!r}, {self.value!r})"

    def value_text(self) -> str:
        """
        Render the value as text ("" when there is none).

        NUMBER values are read back from the literal's digits rather than
        converted with str(), which refuses ints past the interpreter's
        digit limit.
        """
        if self.value is None:
            return ""
        if self.kind == TokenKind.NUMBER:
            return self.literal.replace("_", "").lstrip("0") or "0"
        return str(self.value)

    def is_keyword(self) -> bool:
        """Return True if this token is a keyword."""
        return self.kind in KEYWORDS.values()

    def is_arithmetic_operator(self) -> bool:
        """Return True if this token is a plain arithmetic operator."""
        return self.kind in ARITHMETIC_OPERATORS.values()

    def is_assignment_operator(self) -> bool:
        """Return True if this token is an assignment operator."""
        return self.kind in (
            TokenKind.LET_ASSIGNMENT,
            TokenKind.UNTYPED_ASSIGNMENT,
            TokenKind.TYPED_ASSIGNMENT,
            TokenKind.SHORT_INCREMENT,
            TokenKind.SHORT_DECREMENT,
            TokenKind.SHORT_MULTIPLY,
            TokenKind.SHORT_DIVIDE,
            TokenKind.SHORT_MODULO,
        )


# =============================================================================
# Keyword Classification
# =============================================================================

def identify(buffer: str) -> Token:
    """
    Classify a word as a keyword or an identifier.

    The comparison is case-insensitive; the returned token keeps the
    buffer exactly as written.

    Args:
        buffer: A run of identifier characters

    Returns:
        A keyword token if the folded buffer is reserved, else an IDENTIFIER
    """
    kind = KEYWORDS.get(buffer.lower(), TokenKind.IDENTIFIER)
    return Token(kind, buffer)
