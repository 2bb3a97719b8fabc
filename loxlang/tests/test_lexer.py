"""
Tests for the Lox scanner.
"""
from loxlang.exceptions import DiagnosticKind
from loxlang.lexer import scan
from loxlang.tokens import Token, TokenType


def types(source: str) -> list[TokenType]:
    tokens, _ = scan(source)
    return [tok.type for tok in tokens]


def test_punctuation_and_operators():
    """
    Test that every single and two character operator is recognised.
    """
    assert types("(){},.-+;*/?:") == [
        TokenType.LEFT_PAREN,
        TokenType.RIGHT_PAREN,
        TokenType.LEFT_BRACE,
        TokenType.RIGHT_BRACE,
        TokenType.COMMA,
        TokenType.DOT,
        TokenType.MINUS,
        TokenType.PLUS,
        TokenType.SEMICOLON,
        TokenType.STAR,
        TokenType.SLASH,
        TokenType.QUESTION,
        TokenType.COLON,
        TokenType.EOF,
    ]
    assert types("! != = == < <= > >=") == [
        TokenType.BANG,
        TokenType.BANG_EQUAL,
        TokenType.EQUAL,
        TokenType.EQUAL_EQUAL,
        TokenType.LESS,
        TokenType.LESS_EQUAL,
        TokenType.GREATER,
        TokenType.GREATER_EQUAL,
        TokenType.EOF,
    ]


def test_two_char_lookahead_falls_back():
    """
    Test that '!' followed by something other than '=' stays a single token.
    """
    assert types("!!=") == [TokenType.BANG, TokenType.BANG_EQUAL, TokenType.EOF]
    assert types("===") == [TokenType.EQUAL_EQUAL, TokenType.EQUAL, TokenType.EOF]


def test_comments_and_whitespace_are_skipped():
    tokens, diagnostics = scan("// nothing here\n\t 1 // trailing\r\n")
    assert diagnostics == []
    assert [tok.type for tok in tokens] == [TokenType.NUMBER, TokenType.EOF]
    assert tokens[0].line == 2
    assert tokens[-1].line == 3


def test_slash_is_division_when_not_comment():
    assert types("4 / 2") == [
        TokenType.NUMBER, TokenType.SLASH, TokenType.NUMBER, TokenType.EOF
    ]


def test_string_literal():
    """
    Test that lexeme and literal are both the text between the quotes.
    """
    tokens, diagnostics = scan('"hello world"')
    assert diagnostics == []
    assert tokens[0] == Token(TokenType.STRING, "hello world", "hello world", 1)


def test_multiline_string_counts_lines():
    tokens, diagnostics = scan('"a\nb"\nx')
    assert diagnostics == []
    string, ident, eof = tokens
    assert string.literal == "a\nb"
    assert string.line == 2
    assert ident.line == 3
    assert eof.line == 3


def test_unterminated_string():
    tokens, diagnostics = scan('print "oops')
    assert [tok.type for tok in tokens] == [TokenType.PRINT, TokenType.EOF]
    assert len(diagnostics) == 1
    assert diagnostics[0].message == "Unterminated string."
    assert diagnostics[0].kind == DiagnosticKind.LEXICAL
    assert str(diagnostics[0]) == "[line 1] Error: Unterminated string."
    assert diagnostics[0].at_end


def test_number_literals():
    tokens, _ = scan("123 45.67")
    assert tokens[0].literal == 123.0
    assert tokens[0].lexeme == "123"
    assert tokens[1].literal == 45.67
    assert tokens[1].lexeme == "45.67"


def test_number_lexeme_round_trips():
    """
    Test that re-parsing a NUMBER lexeme gives back its literal.
    """
    tokens, _ = scan("0 7 3.14159 1000000.5 0.1 007.50")
    numbers = [tok for tok in tokens if tok.type == TokenType.NUMBER]
    assert len(numbers) == 6
    for tok in numbers:
        assert float(tok.lexeme) == tok.literal


def test_trailing_dot_is_not_part_of_number():
    tokens, _ = scan("12.")
    assert [tok.type for tok in tokens] == [TokenType.NUMBER, TokenType.DOT, TokenType.EOF]
    assert tokens[0].lexeme == "12"


def test_leading_dot_is_not_part_of_number():
    assert types(".5") == [TokenType.DOT, TokenType.NUMBER, TokenType.EOF]


def test_keywords_and_identifiers():
    source = "and class else false fun for if nil or print return super this true var while"
    kinds = types(source)[:-1]
    assert [kind.value for kind in kinds] == source.split()
    assert types("orchid _private var1") == [
        TokenType.IDENTIFIER,
        TokenType.IDENTIFIER,
        TokenType.IDENTIFIER,
        TokenType.EOF,
    ]


def test_only_number_and_string_carry_literals():
    tokens, _ = scan('var x = "s" + 1;')
    literals = {tok.type: tok.literal for tok in tokens}
    assert literals[TokenType.STRING] == "s"
    assert literals[TokenType.NUMBER] == 1.0
    assert literals[TokenType.VAR] is None
    assert literals[TokenType.IDENTIFIER] is None
    assert literals[TokenType.EOF] is None


def test_unexpected_characters_are_reported_and_skipped():
    """
    Test that scanning carries on past each bad character.
    """
    tokens, diagnostics = scan("1 @ 2\n# 3")
    assert [tok.type for tok in tokens] == [
        TokenType.NUMBER, TokenType.NUMBER, TokenType.NUMBER, TokenType.EOF
    ]
    assert [(d.line, d.message) for d in diagnostics] == [
        (1, "Unexpected character: @"),
        (2, "Unexpected character: #"),
    ]


def test_empty_source_is_just_eof():
    tokens, diagnostics = scan("")
    assert diagnostics == []
    assert tokens == [Token(TokenType.EOF, "", None, 1)]


def test_repeated_scans_do_not_share_diagnostics():
    _, first = scan("@")
    _, second = scan("ok")
    assert len(first) == 1
    assert second == []
