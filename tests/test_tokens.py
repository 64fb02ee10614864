# =============================================================================
# test_tokens.py - Token Model Tests
# =============================================================================
# Tests for TokenKind, Token and keyword classification.
# =============================================================================

import dataclasses

import pytest
from penguin.lexer import KEYWORDS, Token, TokenKind, identify


# =============================================================================
# Keyword Classification Tests
# =============================================================================

class TestIdentify:
    """Test identify() keyword lookup."""

    @pytest.mark.parametrize("word, kind", [
        ("let", TokenKind.ASSIGN),
        ("LET", TokenKind.ASSIGN),
        ("Let", TokenKind.ASSIGN),
        ("func", TokenKind.FUNCTION),
        ("fUnC", TokenKind.FUNCTION),
        ("return", TokenKind.RETURN),
        ("import", TokenKind.IMPORT),
    ])
    def test_keywords(self, word, kind):
        """Keywords match regardless of case."""
        assert identify(word).kind == kind

    def test_case_is_preserved(self):
        """The literal keeps the spelling that was written."""
        assert identify("ImPoRt") == Token(TokenKind.IMPORT, "ImPoRt")

    @pytest.mark.parametrize("word", ["x", "u32", "lets", "function", "_", "main"])
    def test_identifiers(self, word):
        assert identify(word) == Token(TokenKind.IDENTIFIER, word)

    def test_keyword_table_is_lower_case(self):
        assert all(key == key.lower() for key in KEYWORDS)


# =============================================================================
# Token Tests
# =============================================================================

class TestToken:
    """Test the Token record."""

    def test_structural_equality(self):
        assert Token(TokenKind.NUMBER, "5", 5) == Token(TokenKind.NUMBER, "5", 5)
        assert Token(TokenKind.NUMBER, "5", 5) != Token(TokenKind.NUMBER, "05", 5)

    def test_value_defaults_to_none(self):
        assert Token(TokenKind.SEMICOLON, ";").value is None

    def test_hashable(self):
        """Frozen tokens can be used in sets."""
        tokens = {Token(TokenKind.COMMA, ","), Token(TokenKind.COMMA, ",")}
        assert len(tokens) == 1

    def test_frozen(self):
        token = Token(TokenKind.COMMA, ",")
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.literal = ";"

    def test_repr(self):
        assert repr(Token(TokenKind.IDENTIFIER, "x")) == "Token(IDENTIFIER, 'x')"
        assert repr(Token(TokenKind.NUMBER, "1_0", 10)) == "Token(NUMBER, '1_0', 10)"

    def test_value_text(self):
        assert Token(TokenKind.NUMBER, "007", 7).value_text() == "7"
        assert Token(TokenKind.NUMBER, "0_0", 0).value_text() == "0"
        assert Token(TokenKind.COMMA, ",").value_text() == ""

    def test_repr_of_very_long_number(self):
        """Huge values are shown without going through str(int)."""
        digits = "9" * 5000
        token = Token(TokenKind.NUMBER, digits, 10 ** 5000 - 1)
        assert repr(token) == f"Token(NUMBER, '{digits}', {digits})"

    def test_is_keyword(self):
        assert Token(TokenKind.RETURN, "return").is_keyword()
        assert not Token(TokenKind.IDENTIFIER, "x").is_keyword()

    def test_is_arithmetic_operator(self):
        assert Token(TokenKind.MODULO, "%").is_arithmetic_operator()
        assert not Token(TokenKind.SHORT_MODULO, "%=").is_arithmetic_operator()

    @pytest.mark.parametrize("kind", [
        TokenKind.LET_ASSIGNMENT,
        TokenKind.UNTYPED_ASSIGNMENT,
        TokenKind.SHORT_INCREMENT,
        TokenKind.SHORT_DIVIDE,
    ])
    def test_is_assignment_operator(self, kind):
        assert Token(kind, "").is_assignment_operator()

    def test_type_annotation_is_not_assignment(self):
        assert not Token(TokenKind.TYPE_ASSIGNMENT, ":").is_assignment_operator()

    def test_kind_count(self):
        """The token vocabulary is closed."""
        assert len(TokenKind) == 29
